"""
Scribble Backend — Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Every test gets its own app built by create_app(), and with it a
       fresh Store, so no state leaks between tests.

Fixture Hierarchy:
    ├── test_settings:   Settings with a fixed secret and demo data seeded
    ├── app:             FastAPI app built from test_settings
    ├── store:           The app's Store, for direct assertions
    ├── test_client:     HTTPX AsyncClient talking to `app`
    └── signup:          Helper coroutine that registers a user, returns the body
"""

import os
from typing import Any, Awaitable, Callable, Dict

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Set before any scribble import so the module-level app uses them too
os.environ["JWT_SECRET"] = "test-secret-key-for-scribble-tests-0123456789"
os.environ["LOG_LEVEL"] = "WARNING"

from scribble.config import Settings  # noqa: E402
from scribble.main import create_app  # noqa: E402
from scribble.store import Store  # noqa: E402

TEST_SECRET = "test-secret-key-for-scribble-tests-0123456789"


def build_settings(**overrides: Any) -> Settings:
    """Test settings with a fixed secret; keyword overrides win."""
    values: Dict[str, Any] = {
        "jwt_secret": TEST_SECRET,
        "seed_demo_data": True,
        "legacy_token_enabled": False,
        "debug_endpoint_enabled": False,
        "log_level": "WARNING",
    }
    values.update(overrides)
    return Settings(**values)


def client_for(app) -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest.fixture
def test_settings() -> Settings:
    return build_settings()


@pytest.fixture
def app(test_settings):
    return create_app(test_settings)


@pytest.fixture
def store(app) -> Store:
    return app.state.store


@pytest_asyncio.fixture
async def test_client(app):
    """
    Usage:
        async def test_root(test_client):
            response = await test_client.get("/")
            assert response.status_code == 200
    """
    async with client_for(app) as client:
        yield client


@pytest.fixture
def signup(test_client) -> Callable[..., Awaitable[Dict[str, Any]]]:
    """Register a user through the API and return the JSON body ({jwt, name})."""

    async def _signup(email: str = "a@b.com", password: str = "p", name: str = "A") -> Dict[str, Any]:
        response = await test_client.post(
            "/api/signup",
            json={"email": email, "password": password, "name": name},
        )
        assert response.status_code == 200, response.text
        return response.json()

    return _signup
