"""Pytest configuration and shared fixtures for configurator tests."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from configurator.services.store import ConfigurationStore


@pytest.fixture
def store() -> ConfigurationStore:
    """Store at the factory defaults: pivot, single, no panels, three panes, 1000x2400."""
    return ConfigurationStore()


@pytest.fixture
def client() -> TestClient:
    from configurator.api.main import app

    return TestClient(app)
