import pytest
from fastapi.testclient import TestClient

from park_smart.config import AppConfig, default_spots
from park_smart.main import create_app
from park_smart.state.spot_store import SpotStore


@pytest.fixture
def config():
    """Default configuration."""
    return AppConfig()


@pytest.fixture
def store():
    """A fresh store seeded with the default spots."""
    return SpotStore.from_seed(default_spots())


@pytest.fixture
def app(config, store):
    """Application wired to the per-test store."""
    return create_app(config, store=store)


@pytest.fixture
def client(app):
    """Test client with the application lifespan running."""
    with TestClient(app) as test_client:
        yield test_client
