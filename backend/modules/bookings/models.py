"""
Bookings module data models.
"""

from datetime import date as Date, datetime, timezone
from decimal import Decimal
from enum import Enum
from pydantic import BaseModel, Field

from modules.rides.models import CLOCK_TIME_PATTERN, DriverRef


class BookingStatus(str, Enum):
    """Booking status. Transitions after creation are owned by the backend."""

    CONFIRMED = "confirmed"  # Booked, ride not yet taken
    COMPLETED = "completed"  # Ride taken
    CANCELLED = "cancelled"  # Cancelled by passenger or driver


class BookingRequest(BaseModel):
    """Request to book seats on a ride."""

    ride_id: str = Field(..., min_length=1, description="Ride to book")
    passenger_count: int = Field(default=1, ge=1, description="Seats to book")


class Booking(BaseModel):
    """A passenger's reservation on a ride."""

    id: str = Field(..., description="Booking reference from the backend")
    ride_id: str = Field(..., description="Booked ride")
    passenger_id: str = Field(..., description="User who booked")
    passenger_count: int = Field(..., ge=1, description="Seats booked")
    total_price: Decimal = Field(..., ge=0, description="price_per_seat * passenger_count")
    status: BookingStatus = Field(default=BookingStatus.CONFIRMED)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the booking was made",
    )


class BookedRide(BaseModel):
    """Ride details shown next to a booking."""

    id: str
    source: str
    destination: str
    date: Date
    departure_time: str = Field(..., pattern=CLOCK_TIME_PATTERN)
    driver: DriverRef


class BookingSummary(BaseModel):
    """A booking together with the ride it is for."""

    booking: Booking
    ride: BookedRide
