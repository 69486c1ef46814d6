"""Raw configuration and the state derived from it."""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict

from .options import (
    DoorMechanism, LeafCount, SidePanels, GridLayout,
    Finish, HandleType, GlassPattern,
)
from .parts import DoorAssembly
from .pricing import PriceBreakdown


class Configuration(BaseModel):
    """The user's current selection. Replaced on every change, never edited."""
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    door_mechanism: DoorMechanism = DoorMechanism.PIVOT
    leaf_count: LeafCount = LeafCount.SINGLE
    side_panels: SidePanels = SidePanels.NONE
    grid_layout: GridLayout = GridLayout.THREE_PANE
    finish: Finish = Finish.BLACK
    handle_type: HandleType = HandleType.U_GRIP
    glass_pattern: GlassPattern = GlassPattern.STANDARD
    opening_width: float = 1000.0    # Wall opening (mm)
    opening_height: float = 2400.0


class ConfigurationPatch(BaseModel):
    """A partial update; unset fields keep their current value."""
    model_config = ConfigDict(allow_inf_nan=False)

    door_mechanism: DoorMechanism | None = None
    leaf_count: LeafCount | None = None
    side_panels: SidePanels | None = None
    grid_layout: GridLayout | None = None
    finish: Finish | None = None
    handle_type: HandleType | None = None
    glass_pattern: GlassPattern | None = None
    opening_width: float | None = None
    opening_height: float | None = None

    def changes(self) -> dict[str, object]:
        return self.model_dump(exclude_none=True)


class DerivedEnvelope(BaseModel):
    """Width bounds and the leaf/side-panel split for one configuration."""
    model_config = ConfigDict(frozen=True)

    min_opening_width: float
    max_opening_width: float
    door_leaf_width: float      # Per leaf
    side_panel_width: float     # Per panel, 0 without side panels
    hole_width: float


class ValidationResult(BaseModel):
    valid: bool
    errors: list[str] = []

    @classmethod
    def from_errors(cls, errors: list[str]) -> ValidationResult:
        return cls(valid=not errors, errors=errors)


class DerivedState(BaseModel):
    """Everything a consumer reads after a change, computed in one pass."""
    model_config = ConfigDict(frozen=True)

    configuration: Configuration
    envelope: DerivedEnvelope
    assembly: DoorAssembly
    price: PriceBreakdown
