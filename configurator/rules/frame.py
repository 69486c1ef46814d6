"""Perimeter frame: the welded outline every leaf has.

Two full-height stiles left and right, with the top and bottom rails
fitted between them.
"""

from __future__ import annotations

from configurator.rules.base import PartRule
from configurator.models import (
    AssemblyContext, PhysicalPart, PartKind, Orientation,
)


class PerimeterFrameRule(PartRule):
    """Stiles + top/bottom rails for every door type."""

    priority = 10  # Everything else sits inside the frame

    def get_id(self) -> str:
        return "leaf.perimeter_frame"

    def get_name(self) -> str:
        return "Perimeter Frame"

    def applies(self, context: AssemblyContext) -> bool:
        return True

    def generate(self, context: AssemblyContext) -> list[PhysicalPart]:
        p = context.params
        w = context.door_width
        h = context.door_height

        stile_x = w / 2 - p.profile_width / 2
        rail_y = h / 2 - p.rail_height_robust / 2
        vertical = self._tags(Orientation.VERTICAL.value)
        horizontal = self._tags(Orientation.HORIZONTAL.value)

        return [
            PhysicalPart(
                kind=PartKind.STILE,
                x=-stile_x, y=0,
                width=p.profile_width, height=h, depth=p.profile_depth,
                label="Left Stile", tags=vertical,
            ),
            PhysicalPart(
                kind=PartKind.STILE,
                x=stile_x, y=0,
                width=p.profile_width, height=h, depth=p.profile_depth,
                label="Right Stile", tags=vertical,
            ),
            PhysicalPart(
                kind=PartKind.RAIL,
                x=0, y=rail_y,
                width=context.inner_width, height=p.rail_height_robust, depth=p.profile_depth,
                label="Top Rail", tags=horizontal,
            ),
            PhysicalPart(
                kind=PartKind.RAIL,
                x=0, y=-rail_y,
                width=context.inner_width, height=p.rail_height_robust, depth=p.profile_depth,
                label="Bottom Rail", tags=horizontal,
            ),
        ]
