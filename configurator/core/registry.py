"""Which part rules a leaf gets, and in what order."""

from __future__ import annotations

from configurator.models.context import AssemblyContext
from configurator.rules.base import PartRule


class RuleRegistry:
    """Part rules keyed by id. Lookup order is priority, then dependencies."""

    def __init__(self) -> None:
        self._rules: dict[str, PartRule] = {}

    def register(self, rule: PartRule) -> None:
        self._rules[rule.get_id()] = rule

    def unregister(self, rule_id: str) -> None:
        self._rules.pop(rule_id, None)

    def list_rules(self) -> list[PartRule]:
        return list(self._rules.values())

    def get_applicable_rules(self, context: AssemblyContext) -> list[PartRule]:
        """Return rules that apply to the given leaf, sorted by priority."""
        applicable = [r for r in self._rules.values() if r.applies(context)]

        # Sort by priority (lower first), then resolve dependencies
        applicable.sort(key=lambda r: r.priority)
        return self._resolve_order(applicable)

    def _resolve_order(self, rules: list[PartRule]) -> list[PartRule]:
        """Move each rule after the rules it depends on; unknown ids are skipped."""
        rule_map = {r.get_id(): r for r in rules}
        visited: set[str] = set()
        ordered: list[PartRule] = []

        def visit(rule_id: str) -> None:
            if rule_id in visited:
                return
            visited.add(rule_id)
            rule = rule_map.get(rule_id)
            if rule is None:
                return
            for dep_id in rule.dependencies:
                visit(dep_id)
            ordered.append(rule)

        for r in rules:
            visit(r.get_id())

        return ordered


def create_default_registry() -> RuleRegistry:
    """Create a registry with the standard leaf rules."""
    from configurator.rules.frame import PerimeterFrameRule
    from configurator.rules.dividers import GridDividerRule, CenterDividerRule
    from configurator.rules.glass import GlassPanelRule

    registry = RuleRegistry()
    registry.register(PerimeterFrameRule())
    registry.register(GridDividerRule())
    registry.register(CenterDividerRule())
    registry.register(GlassPanelRule())
    return registry
