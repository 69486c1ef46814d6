"""Width envelope and leaf/side-panel sizing.

All functions are pure and total. They take an optional
``ManufacturingParams``; omitting it uses the standard shop dimensions.
"""

from __future__ import annotations
import logging

from configurator.models import (
    LeafCount, SidePanels, ManufacturingParams, DerivedEnvelope, ValidationResult,
)

logger = logging.getLogger(__name__)

DEFAULT_PARAMS = ManufacturingParams()


def hole_width(
    door_width: float,
    leaf_count: LeafCount,
    side_panels: SidePanels,
    params: ManufacturingParams = DEFAULT_PARAMS,
) -> float:
    """Wall hole needed for ``door_width`` of leaves plus frame and minimum panels."""
    return (
        door_width
        + params.frame_profile_width * 2
        + params.side_panel_min_width * side_panels.panels
    )


def min_opening_width(
    leaf_count: LeafCount,
    side_panels: SidePanels,
    params: ManufacturingParams = DEFAULT_PARAMS,
) -> float:
    return (
        params.leaf_min_width * leaf_count.leaves
        + params.frame_profile_width * 2
        + params.side_panel_min_width * side_panels.panels
    )


def max_opening_width(
    leaf_count: LeafCount,
    side_panels: SidePanels,
    params: ManufacturingParams = DEFAULT_PARAMS,
) -> float:
    return (
        params.leaf_max_width * leaf_count.leaves
        + params.frame_profile_width * 2
        + params.side_panel_max_width * side_panels.panels
    )


def side_panel_width(
    total_width: float,
    leaf_count: LeafCount,
    side_panels: SidePanels,
    params: ManufacturingParams = DEFAULT_PARAMS,
) -> float:
    """
    Width of each side panel.

    Leaves are reserved at their minimum width; whatever remains after the
    frame profiles goes to the panels, split evenly. Panels never drop
    below their minimum width.
    """
    count = side_panels.panels
    if count == 0:
        return 0.0

    reserved_leaves = params.leaf_min_width * leaf_count.leaves
    available = total_width - reserved_leaves - params.frame_profile_width * 2
    return max(params.side_panel_min_width, available / count)


def door_leaf_width(
    total_width: float,
    leaf_count: LeafCount,
    side_panels: SidePanels,
    params: ManufacturingParams = DEFAULT_PARAMS,
) -> float:
    """Width of a single leaf (per leaf for double doors)."""
    available = total_width - params.frame_profile_width * 2
    available -= side_panel_width(total_width, leaf_count, side_panels, params) * side_panels.panels
    available /= leaf_count.leaves
    return max(params.leaf_min_width, available)


def clamp_opening_width(
    width: float,
    leaf_count: LeafCount,
    side_panels: SidePanels,
    params: ManufacturingParams = DEFAULT_PARAMS,
) -> float:
    lo = min_opening_width(leaf_count, side_panels, params)
    hi = max_opening_width(leaf_count, side_panels, params)
    clamped = min(max(width, lo), hi)
    if clamped != width:
        logger.debug("Clamped opening width %s -> %s (range %s-%s)", width, clamped, lo, hi)
    return clamped


def clamp_opening_height(
    height: float,
    params: ManufacturingParams = DEFAULT_PARAMS,
) -> float:
    clamped = min(max(height, params.min_height), params.max_height)
    if clamped != height:
        logger.debug("Clamped opening height %s -> %s", height, clamped)
    return clamped


def compute_envelope(
    opening_width: float,
    leaf_count: LeafCount,
    side_panels: SidePanels,
    params: ManufacturingParams = DEFAULT_PARAMS,
) -> DerivedEnvelope:
    """
    Derive bounds and the leaf/panel split for an opening width.

    The width is clamped first; panel and leaf widths are both derived
    from the clamped value.
    """
    width = clamp_opening_width(opening_width, leaf_count, side_panels, params)
    leaf = door_leaf_width(width, leaf_count, side_panels, params)
    return DerivedEnvelope(
        min_opening_width=min_opening_width(leaf_count, side_panels, params),
        max_opening_width=max_opening_width(leaf_count, side_panels, params),
        door_leaf_width=leaf,
        side_panel_width=side_panel_width(width, leaf_count, side_panels, params),
        hole_width=hole_width(leaf * leaf_count.leaves, leaf_count, side_panels, params),
    )


def validate_dimensions(
    width: float,
    height: float,
    leaf_count: LeafCount,
    side_panels: SidePanels,
    params: ManufacturingParams = DEFAULT_PARAMS,
) -> ValidationResult:
    """Strict bounds check; reports every violation instead of clamping."""
    errors: list[str] = []

    min_width = min_opening_width(leaf_count, side_panels, params)
    max_width = max_opening_width(leaf_count, side_panels, params)

    if width < min_width:
        errors.append(f"Width must be at least {min_width:g}mm for this configuration")
    if width > max_width:
        errors.append(f"Width may be at most {max_width:g}mm for this configuration")
    if height < params.min_height:
        errors.append(f"Height must be at least {params.min_height:g}mm")
    if height > params.max_height:
        errors.append(f"Height may be at most {params.max_height:g}mm")

    return ValidationResult.from_errors(errors)


def validate_leaf_dimensions(
    door_width: float,
    door_height: float,
    params: ManufacturingParams = DEFAULT_PARAMS,
    check_maximum: bool = True,
) -> ValidationResult:
    """Check that a single leaf can actually be welded from the profiles."""
    errors: list[str] = []

    min_width = params.profile_width * 3
    min_height = params.rail_height_robust * 3

    if door_width < min_width:
        errors.append(f"Door width too small (min: {min_width:g}mm)")
    if door_height < min_height:
        errors.append(f"Door height too small (min: {min_height:g}mm)")
    if not check_maximum:
        return ValidationResult.from_errors(errors)

    # Profile strength limits
    if door_width > params.leaf_max_width:
        errors.append(f"Door width exceeds maximum ({params.leaf_max_width:g}mm)")
    if door_height > params.max_height:
        errors.append(f"Door height exceeds maximum ({params.max_height:g}mm)")

    return ValidationResult.from_errors(errors)
