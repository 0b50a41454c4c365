"""
Bookings module.

Handles booking seats on ride offers.

Public API:
- IBookingService: Interface for booking operations
- IBookingHistory: Backend record of a user's bookings
- Booking: A confirmed reservation
- Booking exceptions: InsufficientSeatsError, etc.
"""

from .interfaces import IBookingService, IBookingHistory
from .models import (
    Booking,
    BookingStatus,
    BookingRequest,
    BookedRide,
    BookingSummary,
)
from .exceptions import (
    BookingError,
    InsufficientSeatsError,
    InvalidPassengerCountError,
)

__all__ = [
    # Interfaces
    "IBookingService",
    "IBookingHistory",
    # Models
    "Booking",
    "BookingStatus",
    "BookingRequest",
    "BookedRide",
    "BookingSummary",
    # Exceptions
    "BookingError",
    "InsufficientSeatsError",
    "InvalidPassengerCountError",
]
