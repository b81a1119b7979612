"""Pytest configuration and shared fixtures for all tests."""

import sys
from collections.abc import Generator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add src to path for all test modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from cicd360.config import ServiceConfig  # noqa: E402
from cicd360.server.app import create_app  # noqa: E402


@pytest.fixture
def service_config() -> ServiceConfig:
    """A configuration independent of the process environment."""
    return ServiceConfig(environment="test", port=8080)


@pytest.fixture
def client(service_config: ServiceConfig) -> Generator[TestClient, None, None]:
    """Create a test client for an app built from `service_config`."""
    with TestClient(create_app(service_config)) as test_client:
        yield test_client


@pytest.fixture(autouse=True)
def reset_state() -> Generator[None, None, None]:
    """Reset the cached global configuration around each test."""
    import cicd360.config

    cicd360.config._config = None

    yield

    cicd360.config._config = None


# Add pytest markers for different test types
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "server: mark test as server test")


def pytest_collection_modifyitems(config, items):  # noqa: ARG001
    """Modify test items during collection."""
    # Mark tests based on their location
    for item in items:
        if "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        elif "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "server" in str(item.fspath):
            item.add_marker(pytest.mark.server)
