"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from trackpkg.main import app
from trackpkg.services.carrier_loader import CarrierLoader


@pytest.fixture
def loader():
    """Create a carrier loader over the packaged carriers."""
    loader = CarrierLoader()
    loader.load_all()
    return loader


@pytest.fixture
def client():
    """Create a test client for the API."""
    with TestClient(app) as client:
        yield client
