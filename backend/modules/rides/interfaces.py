"""
Rides module interface.

The ride catalog is the external backend that owns offers. Other modules
should depend on IRideCatalog, not on the simulated implementation, so a
real HTTP client can replace it without touching callers.
"""

from datetime import date
from typing import Protocol, Optional, runtime_checkable

from shared.models import Identity

from .models import CreateRideRequest, DriverRide, PopularRoute, RideOffer


@runtime_checkable
class IRideCatalog(Protocol):
    """
    Interface for the ride catalog backend.

    Every method is a network call and may raise NetworkError.
    """

    async def search(
        self,
        source: str,
        destination: str,
        date: Optional[date] = None,
    ) -> list[RideOffer]:
        """
        Return the candidate set for a route.

        Args:
            source: Departure city or location
            destination: Arrival city or location
            date: Travel date; today when None

        Returns:
            Unfiltered offers, in backend order
        """
        ...

    async def get_ride(self, ride_id: str) -> RideOffer:
        """
        Return the latest state of a single offer.

        Raises:
            RideNotFoundError: If the ride is unknown
        """
        ...

    async def book(
        self,
        ride_id: str,
        passenger_id: str,
        passenger_count: int,
    ) -> str:
        """
        Reserve seats on a ride.

        Returns:
            Booking reference assigned by the backend

        Raises:
            RideNotFoundError: If the ride is unknown
            InsufficientSeatsError: If the backend no longer has the seats
        """
        ...

    async def create_ride(
        self,
        driver: Identity,
        request: CreateRideRequest,
    ) -> DriverRide:
        """
        Publish a validated ride for a driver.

        Returns:
            The ride as it will appear on the driver's dashboard
        """
        ...

    async def list_driver_rides(self, driver_id: str) -> list[DriverRide]:
        """Return every ride published by a driver."""
        ...

    async def popular_routes(self) -> list[PopularRoute]:
        """Return the most travelled routes."""
        ...
