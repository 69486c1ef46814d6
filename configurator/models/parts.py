"""Bill-of-materials output models."""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict

from .options import DoorMechanism, GridLayout, Orientation, PartKind


class PhysicalPart(BaseModel):
    """A single steel profile or glass sheet, centered on the leaf origin."""
    model_config = ConfigDict(frozen=True)

    kind: PartKind
    x: float        # Center position relative to leaf center (mm)
    y: float
    z: float = 0.0
    width: float    # Bounding size (mm)
    height: float
    depth: float
    is_glass: bool = False
    label: str = ""
    tags: dict[str, str] = {}  # Producing rule, orientation, ...

    @property
    def orientation(self) -> Orientation:
        return Orientation(self.tags.get("orientation", Orientation.HORIZONTAL.value))


class DoorAssembly(BaseModel):
    """The complete part list for one door leaf."""
    mechanism: DoorMechanism
    grid_layout: GridLayout
    door_width: float
    door_height: float
    parts: list[PhysicalPart]
    stats: AssemblyStats = None  # type: ignore[assignment]

    def model_post_init(self, __context: object) -> None:
        if self.stats is None:
            self.stats = AssemblyStats.from_parts(self.parts)

    def parts_of(self, kind: PartKind) -> list[PhysicalPart]:
        return [p for p in self.parts if p.kind == kind]


class AssemblyStats(BaseModel):
    """Part counts for a generated assembly."""
    total_parts: int = 0
    stiles: int = 0
    rails: int = 0
    dividers: int = 0
    vertical_dividers: int = 0
    glass: int = 0

    @classmethod
    def from_parts(cls, parts: list[PhysicalPart]) -> AssemblyStats:
        dividers = [p for p in parts if p.kind == PartKind.DIVIDER]
        return cls(
            total_parts=len(parts),
            stiles=sum(1 for p in parts if p.kind == PartKind.STILE),
            rails=sum(1 for p in parts if p.kind == PartKind.RAIL),
            dividers=len(dividers),
            vertical_dividers=sum(1 for p in dividers if p.orientation == Orientation.VERTICAL),
            glass=sum(1 for p in parts if p.is_glass),
        )


DoorAssembly.model_rebuild()
