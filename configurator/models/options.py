"""Discrete configuration options and part classifications."""

from __future__ import annotations
from enum import Enum


class DoorMechanism(str, Enum):
    PIVOT = "pivot"
    HINGED = "hinged"
    FIXED_PANEL = "fixed-panel"


class LeafCount(str, Enum):
    SINGLE = "single"
    DOUBLE = "double"

    @property
    def leaves(self) -> int:
        return 2 if self is LeafCount.DOUBLE else 1


class SidePanels(str, Enum):
    NONE = "none"
    LEFT = "left"
    RIGHT = "right"
    BOTH = "both"

    @property
    def panels(self) -> int:
        """Number of side panels this option places beside the leaves."""
        if self is SidePanels.BOTH:
            return 2
        if self is SidePanels.NONE:
            return 0
        return 1


class GridLayout(str, Enum):
    NONE = "none"
    THREE_PANE = "three-pane"
    FOUR_PANE = "four-pane"

    @property
    def dividers(self) -> int:
        """Horizontal dividers needed to split the glass into panes."""
        return {GridLayout.NONE: 0, GridLayout.THREE_PANE: 2, GridLayout.FOUR_PANE: 3}[self]


class Finish(str, Enum):
    BLACK = "black"
    BRONZE = "bronze"
    ANTHRACITE = "anthracite"


class HandleType(str, Enum):
    BAR = "bar"
    CORNER = "corner"
    CRESCENT = "crescent"
    OVAL = "oval"
    LEVER = "lever"
    U_GRIP = "u-grip"
    NONE = "none"


class GlassPattern(str, Enum):
    STANDARD = "standard"
    DT9_ROUNDED = "dt9-rounded"
    DT10_USHAPE = "dt10-ushape"


class PartKind(str, Enum):
    STILE = "stile"
    RAIL = "rail"
    DIVIDER = "divider"
    GLASS = "glass"


class Orientation(str, Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
