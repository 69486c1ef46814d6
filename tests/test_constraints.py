"""Unit tests for the width envelope and leaf/side-panel sizing."""

from __future__ import annotations

import pytest

from configurator.core.constraints import (
    clamp_opening_height,
    clamp_opening_width,
    compute_envelope,
    door_leaf_width,
    hole_width,
    max_opening_width,
    min_opening_width,
    side_panel_width,
    validate_dimensions,
    validate_leaf_dimensions,
)
from configurator.models import LeafCount, ManufacturingParams, SidePanels

ALL_LAYOUTS = [(leaf, side) for leaf in LeafCount for side in SidePanels]


@pytest.mark.parametrize(
    "leaf, side, lo, hi",
    [
        (LeafCount.SINGLE, SidePanels.NONE, 860, 1360),
        (LeafCount.SINGLE, SidePanels.LEFT, 1060, 2160),
        (LeafCount.SINGLE, SidePanels.BOTH, 1260, 2960),
        (LeafCount.DOUBLE, SidePanels.NONE, 1560, 2560),
        (LeafCount.DOUBLE, SidePanels.RIGHT, 1760, 3360),
        (LeafCount.DOUBLE, SidePanels.BOTH, 1960, 4160),
    ],
)
def test_opening_width_bounds(leaf, side, lo, hi):
    assert min_opening_width(leaf, side) == lo
    assert max_opening_width(leaf, side) == hi


def test_hole_width_adds_frame_and_minimum_panels():
    assert hole_width(840, LeafCount.SINGLE, SidePanels.NONE) == 1000
    assert hole_width(840, LeafCount.SINGLE, SidePanels.LEFT) == 1200
    assert hole_width(840, LeafCount.SINGLE, SidePanels.BOTH) == 1400


class TestSidePanelWidth:
    def test_no_panels_is_zero(self):
        assert side_panel_width(1500, LeafCount.SINGLE, SidePanels.NONE) == 0

    def test_single_panel_takes_the_remainder(self):
        assert side_panel_width(1500, LeafCount.SINGLE, SidePanels.LEFT) == 640

    def test_two_panels_split_evenly(self):
        assert side_panel_width(1500, LeafCount.SINGLE, SidePanels.BOTH) == 320

    def test_reserves_minimum_width_for_both_leaves(self):
        # 2200 - 2*700 - 160
        assert side_panel_width(2200, LeafCount.DOUBLE, SidePanels.RIGHT) == 640

    def test_floored_at_minimum(self):
        assert side_panel_width(1100, LeafCount.SINGLE, SidePanels.BOTH) == 200

    def test_not_capped_at_maximum(self):
        assert side_panel_width(2960, LeafCount.SINGLE, SidePanels.BOTH) == 1050


class TestDoorLeafWidth:
    def test_single_leaf_without_panels(self):
        assert door_leaf_width(1000, LeafCount.SINGLE, SidePanels.NONE) == 840

    def test_double_leaf_is_per_leaf(self):
        assert door_leaf_width(2000, LeafCount.DOUBLE, SidePanels.NONE) == 920

    def test_side_panel_absorbs_extra_width(self):
        assert door_leaf_width(1500, LeafCount.SINGLE, SidePanels.LEFT) == 700

    def test_floored_at_minimum(self):
        assert door_leaf_width(800, LeafCount.SINGLE, SidePanels.NONE) == 700

    @pytest.mark.parametrize("leaf", list(LeafCount))
    def test_monotonic_without_side_panels(self, leaf):
        lo = min_opening_width(leaf, SidePanels.NONE)
        hi = max_opening_width(leaf, SidePanels.NONE)
        widths = [lo + step * 25 for step in range(int((hi - lo) / 25) + 1)]
        leaves = [door_leaf_width(w, leaf, SidePanels.NONE) for w in widths]
        assert leaves == sorted(leaves)


class TestClamping:
    def test_width_below_range(self):
        assert clamp_opening_width(500, LeafCount.SINGLE, SidePanels.NONE) == 860

    def test_width_above_range(self):
        assert clamp_opening_width(5000, LeafCount.SINGLE, SidePanels.NONE) == 1360

    def test_width_in_range_untouched(self):
        assert clamp_opening_width(1111, LeafCount.SINGLE, SidePanels.NONE) == 1111

    @pytest.mark.parametrize("leaf, side", ALL_LAYOUTS)
    @pytest.mark.parametrize("width", [0, 900, 1500, 2500, 10_000])
    def test_width_always_inside_envelope(self, leaf, side, width):
        clamped = clamp_opening_width(width, leaf, side)
        assert min_opening_width(leaf, side) <= clamped <= max_opening_width(leaf, side)

    def test_height(self):
        assert clamp_opening_height(1000) == 1800
        assert clamp_opening_height(4000) == 3000
        assert clamp_opening_height(2100) == 2100


class TestComputeEnvelope:
    def test_default_configuration(self):
        env = compute_envelope(1000, LeafCount.SINGLE, SidePanels.NONE)
        assert env.min_opening_width == 860
        assert env.max_opening_width == 1360
        assert env.door_leaf_width == 840
        assert env.side_panel_width == 0
        assert env.hole_width == 1000

    def test_derives_from_clamped_width(self):
        env = compute_envelope(1000, LeafCount.SINGLE, SidePanels.BOTH)
        # Clamped up to 1260 before the split
        assert env.side_panel_width == 200
        assert env.door_leaf_width == 700

    def test_custom_params(self):
        params = ManufacturingParams(frame_profile_width=50)
        env = compute_envelope(1000, LeafCount.SINGLE, SidePanels.NONE, params)
        assert env.min_opening_width == 800
        assert env.door_leaf_width == 900


class TestValidateDimensions:
    def test_valid(self):
        result = validate_dimensions(1000, 2400, LeafCount.SINGLE, SidePanels.NONE)
        assert result.valid
        assert result.errors == []

    def test_too_small(self):
        result = validate_dimensions(500, 1700, LeafCount.SINGLE, SidePanels.NONE)
        assert not result.valid
        assert result.errors == [
            "Width must be at least 860mm for this configuration",
            "Height must be at least 1800mm",
        ]

    def test_too_large(self):
        result = validate_dimensions(5000, 3100, LeafCount.DOUBLE, SidePanels.NONE)
        assert result.errors == [
            "Width may be at most 2560mm for this configuration",
            "Height may be at most 3000mm",
        ]

    def test_bounds_follow_side_panels(self):
        assert validate_dimensions(1000, 2400, LeafCount.SINGLE, SidePanels.NONE).valid
        assert not validate_dimensions(1000, 2400, LeafCount.SINGLE, SidePanels.BOTH).valid


class TestValidateLeafDimensions:
    def test_degenerate_leaf(self):
        result = validate_leaf_dimensions(100, 100)
        assert result.errors == [
            "Door width too small (min: 120mm)",
            "Door height too small (min: 120mm)",
        ]

    def test_oversized_leaf(self):
        result = validate_leaf_dimensions(1300, 2400)
        assert result.errors == ["Door width exceeds maximum (1200mm)"]

    def test_maximum_check_optional(self):
        assert validate_leaf_dimensions(1300, 3500, check_maximum=False).valid
