"""Configuration store: the stateful facade over the pure engines.

One store per configurator session. Every change runs the fixed pipeline
envelope -> assembly -> price on the already-updated configuration and
publishes the result as a single ``DerivedState``.
"""

from __future__ import annotations
import logging
from typing import Any

from configurator.models import (
    Configuration, ConfigurationPatch, DerivedState, DerivedEnvelope,
    DoorAssembly, PhysicalPart, PriceBreakdown, ValidationResult,
    DoorMechanism, LeafCount, SidePanels, GridLayout,
    Finish, HandleType, GlassPattern,
    ManufacturingParams, PriceList,
)
from configurator.core.constraints import (
    clamp_opening_width, clamp_opening_height, compute_envelope, validate_dimensions,
)
from configurator.core.generator import AssemblyGenerator
from configurator.core.pricing import calculate_price

logger = logging.getLogger(__name__)

# Fields whose change invalidates each derived stage.
ENVELOPE_FIELDS = frozenset({"door_mechanism", "leaf_count", "side_panels", "opening_width"})
ASSEMBLY_FIELDS = ENVELOPE_FIELDS | {"grid_layout", "opening_height"}
PRICE_FIELDS = ASSEMBLY_FIELDS | {"handle_type"}


class _Engines:
    """Parameter set + generator shared by the derive steps."""

    def __init__(
        self,
        params: ManufacturingParams | None = None,
        price_list: PriceList | None = None,
        generator: AssemblyGenerator | None = None,
    ) -> None:
        self.params = params or ManufacturingParams()
        self.price_list = price_list or PriceList()
        self.generator = generator or AssemblyGenerator()

    def clamp(self, config: Configuration) -> Configuration:
        width = clamp_opening_width(
            config.opening_width, config.leaf_count, config.side_panels, self.params,
        )
        height = clamp_opening_height(config.opening_height, self.params)
        if width == config.opening_width and height == config.opening_height:
            return config
        return config.model_copy(update={"opening_width": width, "opening_height": height})

    def envelope(self, config: Configuration) -> DerivedEnvelope:
        return compute_envelope(
            config.opening_width, config.leaf_count, config.side_panels, self.params,
        )

    def assembly(self, config: Configuration, envelope: DerivedEnvelope) -> DoorAssembly:
        return self.generator.generate(
            config.door_mechanism,
            config.grid_layout,
            envelope.door_leaf_width,
            config.opening_height,
            self.params,
        )

    def price(self, config: Configuration, envelope: DerivedEnvelope) -> PriceBreakdown:
        return calculate_price(
            envelope.door_leaf_width,
            config.opening_height,
            config.door_mechanism,
            config.grid_layout,
            config.leaf_count,
            config.side_panels,
            config.handle_type,
            self.price_list,
            self.params,
        )

    def derive(self, config: Configuration) -> DerivedState:
        config = self.clamp(config)
        envelope = self.envelope(config)
        return DerivedState(
            configuration=config,
            envelope=envelope,
            assembly=self.assembly(config, envelope),
            price=self.price(config, envelope),
        )


def derive_state(
    configuration: Configuration | None = None,
    params: ManufacturingParams | None = None,
    price_list: PriceList | None = None,
) -> DerivedState:
    """Full recompute from a raw configuration, clamping included."""
    return _Engines(params, price_list).derive(configuration or Configuration())


class ConfigurationStore:
    """Holds the current configuration and its derived state."""

    def __init__(
        self,
        configuration: Configuration | None = None,
        params: ManufacturingParams | None = None,
        price_list: PriceList | None = None,
        generator: AssemblyGenerator | None = None,
    ) -> None:
        self._engines = _Engines(params, price_list, generator)
        self._state = self._engines.derive(configuration or Configuration())

    @property
    def state(self) -> DerivedState:
        return self._state

    @property
    def configuration(self) -> Configuration:
        return self._state.configuration

    @property
    def envelope(self) -> DerivedEnvelope:
        return self._state.envelope

    @property
    def assembly(self) -> DoorAssembly:
        return self._state.assembly

    @property
    def parts(self) -> list[PhysicalPart]:
        return list(self._state.assembly.parts)

    @property
    def price(self) -> PriceBreakdown:
        return self._state.price

    def validate(self) -> ValidationResult:
        """Strict bounds check of the current configuration."""
        config = self._state.configuration
        return validate_dimensions(
            config.opening_width,
            config.opening_height,
            config.leaf_count,
            config.side_panels,
            self._engines.params,
        )

    def apply_configuration_change(
        self, patch: ConfigurationPatch | dict[str, Any],
    ) -> DerivedState:
        """
        Merge ``patch`` into the configuration and refresh derived state.

        Only the stages the touched fields can affect are recomputed; the
        rest are carried over from the previous state. The new state is
        assembled completely before it replaces the old one.
        """
        if not isinstance(patch, ConfigurationPatch):
            patch = ConfigurationPatch.model_validate(patch)

        changes = patch.changes()
        if not changes:
            return self._state

        engines = self._engines
        current = self._state
        touched = set(changes)
        config = current.configuration.model_copy(update=changes)

        if "opening_height" in touched:
            config = config.model_copy(update={
                "opening_height": clamp_opening_height(config.opening_height, engines.params),
            })

        envelope = current.envelope
        if touched & ENVELOPE_FIELDS:
            # Re-clamp against the post-change leaf/side-panel bounds
            config = config.model_copy(update={
                "opening_width": clamp_opening_width(
                    config.opening_width, config.leaf_count, config.side_panels, engines.params,
                ),
            })
            envelope = engines.envelope(config)

        assembly = current.assembly
        if touched & ASSEMBLY_FIELDS:
            assembly = engines.assembly(config, envelope)

        price = current.price
        if touched & PRICE_FIELDS:
            price = engines.price(config, envelope)

        self._state = DerivedState(
            configuration=config,
            envelope=envelope,
            assembly=assembly,
            price=price,
        )
        logger.debug("Applied %s -> total %d", sorted(touched), price.total_price)
        return self._state

    def set_door_mechanism(self, mechanism: DoorMechanism) -> DerivedState:
        return self.apply_configuration_change(ConfigurationPatch(door_mechanism=mechanism))

    def set_leaf_count(self, leaf_count: LeafCount) -> DerivedState:
        return self.apply_configuration_change(ConfigurationPatch(leaf_count=leaf_count))

    def set_side_panels(self, side_panels: SidePanels) -> DerivedState:
        return self.apply_configuration_change(ConfigurationPatch(side_panels=side_panels))

    def set_grid_layout(self, grid_layout: GridLayout) -> DerivedState:
        return self.apply_configuration_change(ConfigurationPatch(grid_layout=grid_layout))

    def set_finish(self, finish: Finish) -> DerivedState:
        return self.apply_configuration_change(ConfigurationPatch(finish=finish))

    def set_handle_type(self, handle_type: HandleType) -> DerivedState:
        return self.apply_configuration_change(ConfigurationPatch(handle_type=handle_type))

    def set_glass_pattern(self, glass_pattern: GlassPattern) -> DerivedState:
        return self.apply_configuration_change(ConfigurationPatch(glass_pattern=glass_pattern))

    def set_opening_width(self, width: float) -> DerivedState:
        return self.apply_configuration_change(ConfigurationPatch(opening_width=width))

    def set_opening_height(self, height: float) -> DerivedState:
        return self.apply_configuration_change(ConfigurationPatch(opening_height=height))

    def set_dimensions(self, width: float, height: float) -> DerivedState:
        return self.apply_configuration_change(
            ConfigurationPatch(opening_width=width, opening_height=height)
        )
