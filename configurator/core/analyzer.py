"""Leaf analysis: inner dimensions and divider placement."""

from __future__ import annotations

from configurator.models import AssemblyContext, GridLayout


# Divider marks as fractions of the leaf height, measured down from the top.
DIVIDER_FRACTIONS: dict[GridLayout, list[tuple[int, int]]] = {
    GridLayout.NONE: [],
    GridLayout.THREE_PANE: [(1, 3), (2, 3)],
    GridLayout.FOUR_PANE: [(1, 4), (1, 2), (3, 4)],
}


def divider_offsets(grid_layout: GridLayout, door_height: float) -> list[float]:
    """Vertical divider centers in mm, relative to the leaf center."""
    return [
        door_height / 2 - (num * door_height) / den
        for num, den in DIVIDER_FRACTIONS[grid_layout]
    ]


def divider_positions(grid_layout: GridLayout, door_height: float) -> list[float]:
    """Divider centers in meters, for renderers working in scene units."""
    return [mm_to_meters(y) for y in divider_offsets(grid_layout, door_height)]


def mm_to_meters(mm: float) -> float:
    return mm / 1000


class LeafAnalyzer:
    """Derives the frame's inner opening and divider marks for a leaf."""

    def analyze(self, context: AssemblyContext) -> None:
        """Run all analysis passes and populate the context."""
        p = context.params
        context.inner_width = context.door_width - p.profile_width * 2
        context.inner_height = context.door_height - p.rail_height_robust * 2
        context.divider_offsets = divider_offsets(context.grid_layout, context.door_height)
