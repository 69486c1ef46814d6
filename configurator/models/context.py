"""Assembly context: accumulates state during part generation."""

from __future__ import annotations
from pydantic import BaseModel, Field

from .options import DoorMechanism, GridLayout
from .parameters import ManufacturingParams
from .parts import PhysicalPart


class AssemblyContext(BaseModel):
    """
    Holds all state during a single assembly generation pass.

    The analyzer adds derived leaf dimensions.
    Rules add generated parts.
    The generator orchestrates the flow.
    """
    # Input
    mechanism: DoorMechanism
    grid_layout: GridLayout
    door_width: float
    door_height: float
    params: ManufacturingParams = Field(default_factory=ManufacturingParams)

    # Analysis results (populated by the analyzer)
    inner_width: float = 0.0
    inner_height: float = 0.0
    divider_offsets: list[float] = []

    # Output (populated by rules)
    parts: list[PhysicalPart] = []

    def add_parts(self, parts: list[PhysicalPart]) -> None:
        self.parts.extend(parts)
