"""
Pytest configuration and fixtures.
"""

import os
import sys
from pathlib import Path

import pytest

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Set test environment
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("RESOURCE_PREFIX", "/teas")
os.environ.setdefault("ALLOW_MISSING_PRICE", "false")

from fastapi.testclient import TestClient  # noqa: E402

from api.server import create_app  # noqa: E402
from core.access_log import RecordingAccessLogger  # noqa: E402
from core.storage import InMemoryResourceStore  # noqa: E402
from services.resource_service import ResourceService  # noqa: E402


@pytest.fixture
def store():
    """A fresh, empty store per test."""
    return InMemoryResourceStore()


@pytest.fixture
def service(store):
    return ResourceService(store)


@pytest.fixture
def access_logger():
    return RecordingAccessLogger()


@pytest.fixture
def app(store, access_logger):
    """App wired to the test's store and a recording access logger."""
    return create_app(store=store, access_logger=access_logger)


@pytest.fixture
def client(app):
    """Test client with the app lifespan running."""
    with TestClient(app) as test_client:
        yield test_client
