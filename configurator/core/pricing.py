"""Pricing engine: quote derived from the same leaf geometry as the parts."""

from __future__ import annotations
import logging
import math

from configurator.models import (
    DoorMechanism, GridLayout, LeafCount, SidePanels, HandleType,
    ManufacturingParams, PriceList, PriceBreakdown,
)

logger = logging.getLogger(__name__)

DEFAULT_PRICES = PriceList()
DEFAULT_PARAMS = ManufacturingParams()


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round .5 away from zero for positive values (``round`` rounds to even)."""
    scale = 10 ** ndigits
    return math.floor(value * scale + 0.5) / scale


def steel_length_per_leaf(
    door_width: float,
    door_height: float,
    grid_layout: GridLayout,
    has_vertical_divider: bool,
    params: ManufacturingParams = DEFAULT_PARAMS,
) -> float:
    """Total profile length for one leaf, in meters."""
    inner_width = door_width - params.profile_width * 2
    total = door_height * 2 + inner_width * 2
    total += inner_width * GridLayout(grid_layout).dividers
    if has_vertical_divider:
        total += door_height - params.rail_height_robust * 2
    return total / 1000


def glass_area_per_leaf(
    door_width: float,
    door_height: float,
    grid_layout: GridLayout,
    params: ManufacturingParams = DEFAULT_PARAMS,
) -> float:
    """Visible glass for one leaf, in square meters, net of divider cover."""
    glass_width = door_width - params.profile_width * 2
    glass_height = door_height - params.rail_height_robust * 2
    divider_area = glass_width * params.rail_height_slim * GridLayout(grid_layout).dividers
    return (glass_width * glass_height - divider_area) / 1_000_000


def calculate_price(
    door_leaf_width: float,
    door_height: float,
    mechanism: DoorMechanism,
    grid_layout: GridLayout,
    leaf_count: LeafCount,
    side_panels: SidePanels,
    handle_type: HandleType | str,
    price_list: PriceList | None = None,
    params: ManufacturingParams | None = None,
) -> PriceBreakdown:
    prices = price_list or DEFAULT_PRICES
    params = params or DEFAULT_PARAMS
    mechanism = DoorMechanism(mechanism)
    leaf_count = LeafCount(leaf_count)
    side_panels = SidePanels(side_panels)

    leaves = leaf_count.leaves
    has_vertical_divider = mechanism == DoorMechanism.FIXED_PANEL

    steel_length = steel_length_per_leaf(
        door_leaf_width, door_height, grid_layout, has_vertical_divider, params,
    ) * leaves
    glass_area = glass_area_per_leaf(door_leaf_width, door_height, grid_layout, params) * leaves

    steel_cost = int(round_half_up(steel_length * prices.steel_per_meter))
    glass_cost = int(round_half_up(glass_area * prices.glass_per_sqm))

    mechanism_surcharge = 0
    if mechanism == DoorMechanism.PIVOT:
        mechanism_surcharge += prices.pivot_surcharge
    if leaf_count == LeafCount.DOUBLE:
        mechanism_surcharge += prices.double_leaf_surcharge

    side_panel_surcharge = side_panels.panels * prices.side_panel_surcharge
    handle_cost = prices.handle_price(handle_type)

    total = (
        steel_cost + glass_cost + prices.base_fee
        + mechanism_surcharge + side_panel_surcharge + handle_cost
    )
    logger.debug(
        "Priced %s leaf x%d: steel %.2fm, glass %.2fm2, total %d",
        mechanism.value, leaves, steel_length, glass_area, total,
    )

    return PriceBreakdown(
        steel_cost=steel_cost,
        glass_cost=glass_cost,
        base_fee=prices.base_fee,
        mechanism_surcharge=mechanism_surcharge,
        side_panel_surcharge=side_panel_surcharge,
        handle_cost=handle_cost,
        total_price=total,
        steel_length_meters=round_half_up(steel_length, 2),
        glass_area_sq_meters=round_half_up(glass_area, 2),
    )
