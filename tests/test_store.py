"""Tests for the configuration store: clamping, recompute discipline, isolation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from configurator.models import (
    Configuration, ConfigurationPatch, DoorMechanism, Finish, GlassPattern, GridLayout,
    HandleType, LeafCount, PartKind, SidePanels,
)
from configurator.services.store import ConfigurationStore, derive_state


class TestDefaults:
    def test_configuration(self, store):
        config = store.configuration
        assert config.door_mechanism == DoorMechanism.PIVOT
        assert config.leaf_count == LeafCount.SINGLE
        assert config.side_panels == SidePanels.NONE
        assert config.grid_layout == GridLayout.THREE_PANE
        assert (config.opening_width, config.opening_height) == (1000, 2400)

    def test_derived_state(self, store):
        assert store.envelope.door_leaf_width == 840
        assert store.envelope.side_panel_width == 0
        assert len(store.parts) == 7
        assert store.assembly.door_width == 840
        assert store.price.total_price == 1751


class TestWidth:
    def test_clamped_up(self, store):
        state = store.set_opening_width(100)
        assert state.configuration.opening_width == 860
        assert state.envelope.door_leaf_width == 700

    def test_clamped_down(self, store):
        state = store.set_opening_width(5000)
        assert state.configuration.opening_width == 1360
        assert state.envelope.door_leaf_width == 1200

    def test_in_range(self, store):
        state = store.set_opening_width(1200)
        assert state.envelope.door_leaf_width == 1040
        assert state.assembly.door_width == 1040

    @pytest.mark.parametrize("leaf", list(LeafCount))
    @pytest.mark.parametrize("side", list(SidePanels))
    @pytest.mark.parametrize("width", [0, 1000, 1500, 2500, 5000])
    def test_always_inside_envelope(self, store, leaf, side, width):
        store.set_leaf_count(leaf)
        store.set_side_panels(side)
        state = store.set_opening_width(width)
        env = state.envelope
        assert env.min_opening_width <= state.configuration.opening_width <= env.max_opening_width

    def test_monotonic_leaf_width(self, store):
        leaves = [store.set_opening_width(w).envelope.door_leaf_width for w in range(800, 1500, 20)]
        assert leaves == sorted(leaves)


class TestLayoutChanges:
    def test_both_side_panels_on_baseline(self, store):
        baseline = store.envelope.door_leaf_width
        state = store.set_side_panels(SidePanels.BOTH)
        # Width re-clamped to the new minimum before the split
        assert state.configuration.opening_width == 1260
        assert state.envelope.side_panel_width == 200
        assert state.envelope.door_leaf_width == 700
        assert state.envelope.door_leaf_width < baseline

    def test_double_leaf_reclamps_width(self, store):
        state = store.set_leaf_count(LeafCount.DOUBLE)
        assert state.configuration.opening_width == 1560
        assert state.envelope.door_leaf_width == 700
        assert state.price.mechanism_surcharge == 450 + 350

    def test_removing_panels_keeps_width_in_range(self, store):
        store.set_side_panels(SidePanels.BOTH)
        store.set_opening_width(2900)
        state = store.set_side_panels(SidePanels.NONE)
        assert state.configuration.opening_width == 1360

    def test_fixed_panel_adds_center_divider(self, store):
        state = store.set_door_mechanism(DoorMechanism.FIXED_PANEL)
        assert state.assembly.stats.vertical_dividers == 1
        assert state.price.mechanism_surcharge == 0
        assert state.price.total_price == 1405

    def test_grid_layout_regenerates_parts(self, store):
        state = store.set_grid_layout(GridLayout.NONE)
        assert state.assembly.parts_of(PartKind.DIVIDER) == []
        assert state.price.total_price < 1751
        state = store.set_grid_layout(GridLayout.FOUR_PANE)
        assert state.assembly.stats.dividers == 3


class TestHeight:
    @pytest.mark.parametrize("requested, stored", [(1000, 1800), (4000, 3000), (2100, 2100)])
    def test_clamped(self, store, requested, stored):
        assert store.set_opening_height(requested).configuration.opening_height == stored

    def test_regenerates_parts_not_envelope(self, store):
        before = store.state
        state = store.set_opening_height(3000)
        assert state.envelope is before.envelope
        stile = state.assembly.parts_of(PartKind.STILE)[0]
        assert stile.height == 3000
        assert state.price.total_price != before.price.total_price

    def test_set_dimensions(self, store):
        state = store.set_dimensions(5000, 1000)
        assert state.configuration.opening_width == 1360
        assert state.configuration.opening_height == 1800


class TestCosmeticChanges:
    def test_finish_touches_nothing_derived(self, store):
        before = store.state
        state = store.set_finish(Finish.BRONZE)
        assert state.configuration.finish == Finish.BRONZE
        assert state.envelope is before.envelope
        assert state.assembly is before.assembly
        assert state.price is before.price

    def test_glass_pattern_touches_nothing_derived(self, store):
        before = store.state
        state = store.set_glass_pattern(GlassPattern.DT9_ROUNDED)
        assert state.configuration.glass_pattern == GlassPattern.DT9_ROUNDED
        assert state.assembly is before.assembly
        assert state.price is before.price

    def test_handle_reprices_only(self, store):
        before = store.state
        state = store.set_handle_type(HandleType.LEVER)
        assert state.assembly is before.assembly
        assert state.price.handle_cost == 65
        assert state.price.total_price == 1751 - 55 + 65


class TestApplyConfigurationChange:
    def test_dict_patch(self, store):
        state = store.apply_configuration_change(
            {"opening_width": 1200, "grid_layout": "four-pane"}
        )
        assert state.envelope.door_leaf_width == 1040
        assert state.assembly.stats.dividers == 3

    def test_empty_patch_is_a_no_op(self, store):
        before = store.state
        assert store.apply_configuration_change(ConfigurationPatch()) is before

    def test_invalid_option_rejected(self, store):
        before = store.state
        with pytest.raises(ValidationError):
            store.apply_configuration_change({"door_mechanism": "sliding"})
        assert store.state is before

    def test_width_clamped_against_new_side_panels(self, store):
        # Width in the same patch is clamped against the new side panels
        state = store.apply_configuration_change(
            {"opening_width": 1000, "side_panels": "left"}
        )
        assert state.configuration.opening_width == 1060
        assert state.envelope.side_panel_width == 200

    def test_previous_state_unchanged(self, store):
        before = store.state
        store.set_opening_width(1300)
        assert before.configuration.opening_width == 1000
        assert before.envelope.door_leaf_width == 840

    def test_matches_full_recompute(self, store):
        store.set_door_mechanism(DoorMechanism.HINGED)
        store.set_side_panels(SidePanels.RIGHT)
        store.set_opening_width(1777)
        store.set_handle_type(HandleType.CRESCENT)
        store.set_opening_height(2050)
        assert store.state == derive_state(store.configuration)


class TestDeriveState:
    def test_clamps_raw_configuration(self):
        state = derive_state(Configuration(opening_width=5000, opening_height=500))
        assert state.configuration.opening_width == 1360
        assert state.configuration.opening_height == 1800

    def test_idempotent(self):
        config = Configuration(
            door_mechanism=DoorMechanism.FIXED_PANEL,
            leaf_count=LeafCount.DOUBLE,
            side_panels=SidePanels.BOTH,
            grid_layout=GridLayout.FOUR_PANE,
            opening_width=2500,
            opening_height=2650,
        )
        assert derive_state(config) == derive_state(config)


def test_validate(store):
    assert store.validate().valid


def test_stores_are_independent():
    a = ConfigurationStore()
    b = ConfigurationStore()
    a.set_leaf_count(LeafCount.DOUBLE)
    assert b.configuration.leaf_count == LeafCount.SINGLE
    assert b.envelope.door_leaf_width == 840


def test_initial_configuration_is_clamped():
    store = ConfigurationStore(Configuration(leaf_count=LeafCount.DOUBLE))
    assert store.configuration.opening_width == 1560


class TestNonFiniteInput:
    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_width_rejected(self, store, value):
        before = store.state
        with pytest.raises(ValidationError):
            store.set_opening_width(value)
        assert store.state is before
        env = store.envelope
        assert env.min_opening_width <= store.configuration.opening_width <= env.max_opening_width

    def test_height_rejected(self, store):
        with pytest.raises(ValidationError):
            store.set_opening_height(float("nan"))
        assert store.configuration.opening_height == 2400

    def test_raw_configuration_rejected(self):
        with pytest.raises(ValidationError):
            Configuration(opening_width=float("nan"))


def test_parts_accessor_is_a_copy(store):
    before = store.state
    store.set_finish(Finish.BRONZE)
    store.parts.append(store.parts[0])
    assert len(store.parts) == 7
    assert len(before.assembly.parts) == 7
    assert store.assembly.stats.total_parts == 7
