"""
Shared test fixtures - test client and sample product records.
"""

import os

import pytest
from fastapi.testclient import TestClient

# Never reach a real provider from tests
os.environ["OPENROUTER_API_KEY"] = "test-key-for-testing-only"

from packbot.main import app
from packbot.routers.chat import get_client


@pytest.fixture
def client():
    """FastAPI test client."""
    yield TestClient(app)
    app.dependency_overrides.pop(get_client, None)


@pytest.fixture
def raw_input():
    """The worked example from the intake: 10x5x3 in, 5 lbs, fragility 3, 100 units."""
    return {"dimensions": "10x5x3", "weight": "5", "fragility": "3", "quantity": "100"}


@pytest.fixture
def product():
    """NormalizedProduct for raw_input."""
    return {
        "length": 10.0,
        "width": 5.0,
        "height": 3.0,
        "weight": 5.0,
        "fragility_level": 3,
        "quantity": 100,
    }
