"""Exceptions raised by the configurator core."""

from __future__ import annotations


class ConfiguratorError(Exception):
    """Base class for configurator failures."""


class DegenerateGeometryError(ConfiguratorError):
    """Raised when a leaf is too small to hold its profiles and glass."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Cannot build door leaf: {'; '.join(errors)}")
