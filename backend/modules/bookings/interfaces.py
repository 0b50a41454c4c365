"""
Bookings module interface.

Other modules should depend on IBookingService, not the concrete implementation.
IBookingHistory is the backend side that remembers a user's bookings.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import Identity
from modules.rides.models import RideOffer

from .models import Booking, BookingSummary


@runtime_checkable
class IBookingService(Protocol):
    """
    Interface for booking operations.

    This protocol defines the contract that the bookings module exposes
    to the presentation layer.
    """

    async def book(
        self,
        identity: Optional[Identity],
        offer: RideOffer,
        passenger_count: int,
    ) -> Booking:
        """
        Book seats on an offer.

        Args:
            identity: Current session identity, None when anonymous
            offer: Offer the user picked from the search results
            passenger_count: Seats to book

        Returns:
            Confirmed booking

        Raises:
            AuthRequiredError: If identity is None
            InvalidPassengerCountError: If passenger_count < 1
            InsufficientSeatsError: If the offer lacks the seats
        """
        ...


@runtime_checkable
class IBookingHistory(Protocol):
    """Backend record of the bookings a user has made."""

    async def list_bookings(self, user_id: str) -> list[BookingSummary]:
        """Return a user's bookings, most recent ride first."""
        ...
