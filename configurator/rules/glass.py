"""Glass panel rule: one laminated sheet per leaf, inset inside the frame."""

from __future__ import annotations

from configurator.rules.base import PartRule
from configurator.models import (
    AssemblyContext, PhysicalPart, PartKind, Orientation,
)


class GlassPanelRule(PartRule):
    priority = 90  # Listed after all steel
    dependencies = ["leaf.perimeter_frame"]

    def get_id(self) -> str:
        return "leaf.glass_panel"

    def get_name(self) -> str:
        return "Main Glass Panel"

    def applies(self, context: AssemblyContext) -> bool:
        return True

    def generate(self, context: AssemblyContext) -> list[PhysicalPart]:
        p = context.params
        return [
            PhysicalPart(
                kind=PartKind.GLASS,
                x=0, y=0,
                width=context.inner_width - p.glass_offset * 2,
                height=context.inner_height - p.glass_offset * 2,
                depth=p.glass_thickness,
                is_glass=True,
                label="Main Glass Panel",
                tags=self._tags(Orientation.VERTICAL.value),
            )
        ]
