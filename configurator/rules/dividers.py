"""Divider rules: slim grid rails and the fixed-panel center post.

Dividers are decorative overlays on the single glass sheet; they do
not split the glass.
"""

from __future__ import annotations

from configurator.rules.base import PartRule
from configurator.core.analyzer import DIVIDER_FRACTIONS
from configurator.models import (
    AssemblyContext, PhysicalPart, PartKind, Orientation,
    DoorMechanism, GridLayout,
)


class GridDividerRule(PartRule):
    """Horizontal slim rails splitting the glass into three or four panes."""

    priority = 20
    dependencies = ["leaf.perimeter_frame"]

    def get_id(self) -> str:
        return "leaf.grid_dividers"

    def get_name(self) -> str:
        return "Grid Dividers"

    def applies(self, context: AssemblyContext) -> bool:
        return context.grid_layout != GridLayout.NONE

    def generate(self, context: AssemblyContext) -> list[PhysicalPart]:
        p = context.params
        fractions = DIVIDER_FRACTIONS[context.grid_layout]
        tags = self._tags(Orientation.HORIZONTAL.value)

        return [
            PhysicalPart(
                kind=PartKind.DIVIDER,
                x=0, y=y,
                width=context.inner_width, height=p.rail_height_slim, depth=p.profile_depth,
                label=f"Divider {num}/{den}", tags=tags,
            )
            for y, (num, den) in zip(context.divider_offsets, fractions)
        ]


class CenterDividerRule(PartRule):
    """Vertical post between the rails of a fixed panel."""

    priority = 30
    dependencies = ["leaf.perimeter_frame"]

    def get_id(self) -> str:
        return "leaf.center_divider"

    def get_name(self) -> str:
        return "Center Vertical Divider"

    def applies(self, context: AssemblyContext) -> bool:
        return context.mechanism == DoorMechanism.FIXED_PANEL

    def generate(self, context: AssemblyContext) -> list[PhysicalPart]:
        p = context.params
        return [
            PhysicalPart(
                kind=PartKind.DIVIDER,
                x=0, y=0,
                width=p.profile_width, height=context.inner_height, depth=p.profile_depth,
                label="Center Vertical Divider",
                tags=self._tags(Orientation.VERTICAL.value),
            )
        ]
