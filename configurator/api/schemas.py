"""API request/response schemas."""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field

from configurator.models import (
    Configuration, ConfigurationPatch, DoorMechanism, GridLayout,
)
from configurator.services.catalog import OptionInfo


class ConfigureRequest(BaseModel):
    """A base configuration plus the change the UI just made."""
    configuration: Configuration = Field(default_factory=Configuration)
    patch: ConfigurationPatch = Field(default_factory=ConfigurationPatch)


class AssemblyRequest(BaseModel):
    """Request body for the /assembly endpoint."""
    model_config = ConfigDict(allow_inf_nan=False)

    mechanism: DoorMechanism
    grid_layout: GridLayout
    door_width: float
    door_height: float


class RuleInfo(BaseModel):
    id: str
    name: str
    priority: int


class OptionsResponse(BaseModel):
    options: dict[str, list[OptionInfo]]


class ErrorResponse(BaseModel):
    error: str
    error_type: str
    details: list[dict[str, str]] | None = None
