"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.

When a real marketplace backend exists, only the catalog and authenticator
created here need to change to HTTP clients.
"""

import uuid
from typing import TYPE_CHECKING, Optional

from fastapi import Depends, Header

from shared.config import get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from shared.storage import IKeyValueStore
    from modules.auth.interfaces import IAuthenticator
    from modules.auth.service import SessionStore
    from modules.bookings.interfaces import IBookingService
    from modules.dashboard.interfaces import IDashboardService
    from modules.rides.catalog import SimulatedRideCatalog
    from modules.rides.service import RideService


SESSION_HEADER = "X-Session-ID"


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    Services are cached as singletons within the container. Session stores
    are not cached: each request gets one over its session's persisted
    slot, so anonymous clients leave nothing behind.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self) -> None:
        self._storage: "IKeyValueStore | None" = None
        self._authenticator: "IAuthenticator | None" = None
        self._catalog: "SimulatedRideCatalog | None" = None
        self._ride_service: "RideService | None" = None
        self._booking_service: "IBookingService | None" = None
        self._dashboard_service: "IDashboardService | None" = None

    @property
    def storage(self) -> "IKeyValueStore":
        """Get the backing key-value store for persisted sessions."""
        if self._storage is None:
            from shared.storage import create_key_value_store
            self._storage = create_key_value_store()
        return self._storage

    @property
    def authenticator(self) -> "IAuthenticator":
        """Get the identity backend."""
        if self._authenticator is None:
            from modules.auth.authenticator import SimulatedAuthenticator
            self._authenticator = SimulatedAuthenticator()
        return self._authenticator

    @property
    def catalog(self) -> "SimulatedRideCatalog":
        """Get the ride catalog backend (also the booking history)."""
        if self._catalog is None:
            from modules.rides.catalog import SimulatedRideCatalog
            self._catalog = SimulatedRideCatalog()
        return self._catalog

    @property
    def rides(self) -> "RideService":
        """Get the ride service instance."""
        if self._ride_service is None:
            from modules.rides.service import RideService
            self._ride_service = RideService(catalog=self.catalog)
        return self._ride_service

    @property
    def bookings(self) -> "IBookingService":
        """Get the booking service instance."""
        if self._booking_service is None:
            from modules.bookings.service import BookingService
            self._booking_service = BookingService(catalog=self.catalog)
        return self._booking_service

    @property
    def dashboard(self) -> "IDashboardService":
        """Get the dashboard service instance."""
        if self._dashboard_service is None:
            from modules.dashboard.service import DashboardService
            self._dashboard_service = DashboardService(
                catalog=self.catalog,
                history=self.catalog,
            )
        return self._dashboard_service

    def session(self, session_id: str) -> "SessionStore":
        """
        Build the session store for a session ID.

        The identity lives in the backing key-value store, which only holds
        logged-in sessions; logout deletes the slot.
        """
        from modules.auth.service import SessionStore
        from shared.storage import NamespacedKeyValueStore
        return SessionStore(
            authenticator=self.authenticator,
            storage=NamespacedKeyValueStore(self.storage, session_id),
            storage_key=get_settings().session_storage_key,
            session_id=session_id,
        )

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._storage = None
        self._authenticator = None
        self._catalog = None
        self._ride_service = None
        self._booking_service = None
        self._dashboard_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_session_id(
    session_id: Optional[str] = Header(default=None, alias=SESSION_HEADER),
) -> str:
    """Session ID from the request header, or a fresh one for new clients."""
    return session_id or uuid.uuid4().hex


def get_session_store(session_id: str = Depends(get_session_id)) -> "SessionStore":
    """FastAPI dependency for the caller's session store."""
    return get_container().session(session_id)


def get_ride_service() -> "RideService":
    """FastAPI dependency for ride service."""
    return get_container().rides


def get_booking_service() -> "IBookingService":
    """FastAPI dependency for booking service."""
    return get_container().bookings


def get_dashboard_service() -> "IDashboardService":
    """FastAPI dependency for dashboard service."""
    return get_container().dashboard
