"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import date
from decimal import Decimal

from shared.config import get_settings
from shared.models import Identity, UserRole
from shared.storage import InMemoryKeyValueStore
from modules.rides.models import DriverRef, RideOffer


TRAVEL_DATE = date(2030, 6, 1)


@pytest.fixture(autouse=True)
def no_simulated_latency(monkeypatch):
    """Run simulated collaborators without delays and with fresh settings."""
    monkeypatch.setenv("CARPOOL_SIMULATED_LATENCY_SECONDS", "0")
    monkeypatch.setenv("CARPOOL_SEARCH_LATENCY_SECONDS", "0")
    monkeypatch.delenv("CARPOOL_SESSION_STORE_PATH", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def storage() -> InMemoryKeyValueStore:
    """Empty in-memory key-value store."""
    return InMemoryKeyValueStore()


@pytest.fixture
def passenger() -> Identity:
    """A logged-in passenger."""
    return Identity(
        id="user-123",
        display_name="John Doe",
        email="john@example.com",
        role=UserRole.PASSENGER,
    )


@pytest.fixture
def driver() -> Identity:
    """A logged-in driver."""
    return Identity(
        id="driver-9",
        display_name="Dana Driver",
        email="dana@example.com",
        role=UserRole.DRIVER,
    )


@pytest.fixture
def make_offer():
    """
    Factory for ride offers.

    Only the fields a test cares about need to be given.
    """

    def _make_offer(
        id: str = "ride-1",
        price: int | str = 35,
        seats: int = 3,
        female_only: bool = False,
        departure: str = "08:00",
        **overrides,
    ) -> RideOffer:
        data = {
            "id": id,
            "driver": DriverRef(
                id="driver-1",
                display_name="Michael Chen",
                rating=4.8,
                verified=True,
            ),
            "source": "New York",
            "destination": "Boston",
            "date": TRAVEL_DATE,
            "departure_time": departure,
            "arrival_time": None,
            "price_per_seat": Decimal(str(price)),
            "available_seats": seats,
            "female_only": female_only,
            "vehicle_model": "Toyota Camry",
            "vehicle_color": "Blue",
        }
        data.update(overrides)
        return RideOffer(**data)

    return _make_offer


@pytest.fixture
def scenario_offers(make_offer) -> list[RideOffer]:
    """Three offers: 35/3 seats/08:00, 28/4 seats/10:30, 42/2 seats/09:15 female only."""
    return [
        make_offer(id="ride-a", price=35, seats=3, departure="08:00"),
        make_offer(id="ride-b", price=28, seats=4, departure="10:30"),
        make_offer(id="ride-c", price=42, seats=2, female_only=True, departure="09:15"),
    ]
