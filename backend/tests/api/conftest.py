"""Fixtures for HTTP API tests."""

import pytest
from fastapi.testclient import TestClient

from api import create_app
from api.dependencies import SESSION_HEADER, reset_container


@pytest.fixture
def client():
    """Test client over a fresh app and service container."""
    reset_container()
    with TestClient(create_app()) as client:
        yield client
    reset_container()


@pytest.fixture
def login(client):
    """Log a session in and return its request headers."""

    def _login(session_id: str = "session-1", email: str = "john@example.com") -> dict:
        headers = {SESSION_HEADER: session_id}
        response = client.post(
            "/api/auth/login",
            json={"email": email, "password": "secret"},
            headers=headers,
        )
        assert response.status_code == 200
        return headers

    return _login


@pytest.fixture
def register_driver(client):
    """Register a driver session and return its request headers."""

    def _register(session_id: str = "driver-session") -> dict:
        headers = {SESSION_HEADER: session_id}
        response = client.post(
            "/api/auth/register",
            json={
                "display_name": "Dana Driver",
                "email": "dana@example.com",
                "password": "secret",
                "role": "driver",
            },
            headers=headers,
        )
        assert response.status_code == 201
        return headers

    return _register


@pytest.fixture
def search_rides(client):
    """Search New York to Boston and return offer IDs keyed by ID prefix."""

    def _search() -> dict[str, str]:
        response = client.post(
            "/api/rides/search",
            json={"source": "New York", "destination": "Boston"},
        )
        assert response.status_code == 200
        return {"-".join(ride["id"].split("-")[:2]): ride["id"] for ride in response.json()["rides"]}

    return _search
