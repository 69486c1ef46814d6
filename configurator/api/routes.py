"""FastAPI route definitions.

Each request gets its own ConfigurationStore; nothing is shared between
requests.
"""

from __future__ import annotations

from fastapi import APIRouter

from configurator.models import (
    Configuration, DerivedState, DoorAssembly, ValidationResult,
)
from configurator.core.constraints import validate_dimensions
from configurator.core.generator import generate_assembly, list_rules
from configurator.services.catalog import option_catalog
from configurator.services.store import ConfigurationStore
from configurator.api.schemas import (
    AssemblyRequest, ConfigureRequest, OptionsResponse, RuleInfo,
)

router = APIRouter()


@router.post("/configure", response_model=DerivedState)
async def configure(request: ConfigureRequest) -> DerivedState:
    """Apply a change to a configuration and return everything derived from it."""
    store = ConfigurationStore(request.configuration)
    return store.apply_configuration_change(request.patch)


@router.post("/validate", response_model=ValidationResult)
async def validate(configuration: Configuration) -> ValidationResult:
    """Strict check of the raw dimensions, without clamping."""
    return validate_dimensions(
        configuration.opening_width,
        configuration.opening_height,
        configuration.leaf_count,
        configuration.side_panels,
    )


@router.post("/assembly", response_model=DoorAssembly)
async def assembly(request: AssemblyRequest) -> DoorAssembly:
    """Part list for a single leaf of the given size."""
    return generate_assembly(
        request.mechanism, request.grid_layout, request.door_width, request.door_height,
    )


@router.get("/options", response_model=OptionsResponse)
async def options() -> OptionsResponse:
    return OptionsResponse(options=option_catalog())


@router.get("/rules", response_model=list[RuleInfo])
async def rules() -> list[RuleInfo]:
    """List the part rules the generator runs."""
    return [RuleInfo(**r) for r in list_rules()]


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
