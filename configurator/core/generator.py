"""Assembly generator: orchestrates leaf analysis and rule execution."""

from __future__ import annotations
import logging

from configurator.errors import DegenerateGeometryError
from configurator.models import (
    AssemblyContext, DoorAssembly, DoorMechanism, GridLayout, ManufacturingParams,
)
from configurator.core.analyzer import LeafAnalyzer
from configurator.core.constraints import validate_leaf_dimensions
from configurator.core.registry import RuleRegistry, create_default_registry

logger = logging.getLogger(__name__)


class AssemblyGenerator:
    """
    Stateless assembly generator.

    Takes a leaf size + mechanism + grid layout, runs analysis, executes
    applicable rules, and returns a complete DoorAssembly.
    """

    def __init__(self, registry: RuleRegistry | None = None) -> None:
        self.registry = registry or create_default_registry()
        self.analyzer = LeafAnalyzer()

    def generate(
        self,
        mechanism: DoorMechanism,
        grid_layout: GridLayout,
        door_width: float,
        door_height: float,
        params: ManufacturingParams | None = None,
    ) -> DoorAssembly:
        if params is None:
            params = ManufacturingParams()
        mechanism = DoorMechanism(mechanism)
        grid_layout = GridLayout(grid_layout)

        check = validate_leaf_dimensions(door_width, door_height, params, check_maximum=False)
        if not check.valid:
            raise DegenerateGeometryError(check.errors)

        context = AssemblyContext(
            mechanism=mechanism,
            grid_layout=grid_layout,
            door_width=door_width,
            door_height=door_height,
            params=params,
        )

        # Analysis phase: inner opening, divider marks
        self.analyzer.analyze(context)

        # Generation phase: run applicable rules
        rules = self.registry.get_applicable_rules(context)
        for rule in rules:
            context.add_parts(rule.generate(context))

        logger.debug(
            "Generated %d parts for %s/%s leaf %sx%s (rules: %s)",
            len(context.parts), mechanism.value, grid_layout.value,
            door_width, door_height, [r.get_id() for r in rules],
        )

        return DoorAssembly(
            mechanism=mechanism,
            grid_layout=grid_layout,
            door_width=door_width,
            door_height=door_height,
            parts=context.parts,
        )


_default_generator = AssemblyGenerator()


def generate_assembly(
    mechanism: DoorMechanism,
    grid_layout: GridLayout,
    door_leaf_width: float,
    door_height: float,
    params: ManufacturingParams | None = None,
) -> DoorAssembly:
    """Build the part list for one leaf with the standard rules."""
    return _default_generator.generate(
        mechanism, grid_layout, door_leaf_width, door_height, params,
    )


def list_rules() -> list[dict[str, object]]:
    """The standard rules in registration order."""
    return [
        {"id": r.get_id(), "name": r.get_name(), "priority": r.priority}
        for r in _default_generator.registry.list_rules()
    ]
