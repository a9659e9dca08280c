"""Shared fixtures for the API tests."""

import pytest
from fastapi.testclient import TestClient

from user_management_api.app.main import app
from user_management_api.app.services.user_service import UserService


@pytest.fixture(autouse=True)
def fresh_store():
    """Start every test from the three demo users."""
    UserService.reset(seed=True)
    yield
    UserService.reset(seed=True)


@pytest.fixture
def client():
    """HTTP client bound to the application."""
    return TestClient(app)


@pytest.fixture
def new_user():
    return {"name": "Alice Cooper", "email": "alice@example.com", "age": 42}
