"""
Bookings module exceptions.

These exceptions are raised by the bookings module and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from typing import Optional

from shared.exceptions import CarpoolError, ValidationError


class BookingError(CarpoolError):
    """Base exception for booking-related errors."""

    pass


class InsufficientSeatsError(BookingError):
    """
    Raised when a ride has fewer free seats than requested.

    The UI should refresh the ride list, since the seat count it showed
    is probably stale.
    """

    def __init__(
        self,
        ride_id: str,
        requested: int,
        available: int,
    ):
        super().__init__(
            f"Not enough seats. Requested: {requested}, available: {available}",
            code="INSUFFICIENT_SEATS",
            details={
                "ride_id": ride_id,
                "requested": requested,
                "available": available,
            },
        )


class InvalidPassengerCountError(ValidationError):
    """Raised when a booking asks for fewer than one seat."""

    def __init__(self, passenger_count: int, reason: Optional[str] = None):
        super().__init__(
            f"Invalid passenger count: {passenger_count}. {reason or 'At least one seat is required'}",
            code="INVALID_PASSENGER_COUNT",
            details={"passenger_count": passenger_count},
        )
