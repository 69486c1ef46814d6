"""Part rule interface.

A rule owns one family of leaf parts: the perimeter profiles, the glazing
bars, or the glass. The generator runs every rule whose ``applies()`` holds,
in registry order, and collects what ``generate()`` returns.
"""

from __future__ import annotations
from abc import ABC, abstractmethod

from configurator.models.context import AssemblyContext
from configurator.models.parts import PhysicalPart


class PartRule(ABC):
    """One step of leaf generation, reading the analysed context."""

    # Smaller runs earlier; also the emit order of the part list.
    priority: int = 100

    # Rule ids whose parts must already be in the context.
    dependencies: list[str] = []

    @abstractmethod
    def get_id(self) -> str:
        """Dotted id, e.g. ``leaf.perimeter_frame``."""

    @abstractmethod
    def get_name(self) -> str:
        """Display name listed by ``GET /rules``."""

    @abstractmethod
    def applies(self, context: AssemblyContext) -> bool:
        ...

    @abstractmethod
    def generate(self, context: AssemblyContext) -> list[PhysicalPart]:
        """Parts for this leaf, positioned relative to the leaf center."""

    def _tags(self, orientation: str) -> dict[str, str]:
        return {"rule": self.get_id(), "orientation": orientation}
