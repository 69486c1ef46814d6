"""Option catalog: display labels for every selectable value."""

from __future__ import annotations
from enum import Enum

from pydantic import BaseModel

from configurator.models import (
    DoorMechanism, LeafCount, SidePanels, GridLayout,
    Finish, HandleType, GlassPattern, PriceList,
)


class OptionInfo(BaseModel):
    value: str
    label: str
    description: str = ""
    price: int | None = None


_LABELS: dict[Enum, tuple[str, str]] = {
    DoorMechanism.PIVOT: ("Pivot door", "Turns on a pivot axis set in from the wall"),
    DoorMechanism.HINGED: ("Hinged door", "Classic side-hung leaf"),
    DoorMechanism.FIXED_PANEL: ("Fixed panel", "Non-opening glazed panel with center post"),
    LeafCount.SINGLE: ("Single", "1 door leaf"),
    LeafCount.DOUBLE: ("Double", "2 door leaves"),
    SidePanels.NONE: ("No side panels", ""),
    SidePanels.LEFT: ("Left", "Fixed panel left of the door"),
    SidePanels.RIGHT: ("Right", "Fixed panel right of the door"),
    SidePanels.BOTH: ("Both sides", "Fixed panels on both sides"),
    GridLayout.NONE: ("No grid", "One undivided glass surface"),
    GridLayout.THREE_PANE: ("3 panes", "Two horizontal dividers"),
    GridLayout.FOUR_PANE: ("4 panes", "Three horizontal dividers"),
    Finish.BLACK: ("Matte black", "Classic and timeless"),
    Finish.BRONZE: ("Bronze", "Warm and industrial"),
    Finish.ANTHRACITE: ("Anthracite", "Modern and neutral"),
    HandleType.BAR: ("Bar handle", ""),
    HandleType.CORNER: ("Corner handle", ""),
    HandleType.CRESCENT: ("Crescent handle", ""),
    HandleType.OVAL: ("Oval handle", ""),
    HandleType.LEVER: ("Lever", "Classic door lever"),
    HandleType.U_GRIP: ("U-grip", "Vertical grip for pivot doors"),
    HandleType.NONE: ("No handle", "For fixed panels"),
    GlassPattern.STANDARD: ("Standard", "Rectangular glass"),
    GlassPattern.DT9_ROUNDED: ("DT9 rounded", "Glass with rounded corners"),
    GlassPattern.DT10_USHAPE: ("DT10 U-shape", "U-shaped upper and lower glass"),
}


def _options(enum_cls: type[Enum], prices: dict | None = None) -> list[OptionInfo]:
    options = []
    for member in enum_cls:
        label, description = _LABELS.get(member, (member.value, ""))
        options.append(OptionInfo(
            value=member.value,
            label=label,
            description=description,
            price=prices.get(member) if prices is not None else None,
        ))
    return options


def option_catalog(price_list: PriceList | None = None) -> dict[str, list[OptionInfo]]:
    """All choices per configuration field, keyed by field name."""
    prices = price_list or PriceList()
    return {
        "door_mechanism": _options(DoorMechanism),
        "leaf_count": _options(LeafCount),
        "side_panels": _options(SidePanels),
        "grid_layout": _options(GridLayout),
        "finish": _options(Finish),
        "handle_type": _options(HandleType, prices.handle_prices),
        "glass_pattern": _options(GlassPattern),
    }
