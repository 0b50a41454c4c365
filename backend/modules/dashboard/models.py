"""
Dashboard module data models.
"""

from pydantic import BaseModel, Field

from shared.models import UserRole
from modules.bookings.models import BookingSummary
from modules.rides.models import DriverRide


class Dashboard(BaseModel):
    """
    A user's bookings and, for drivers, published rides.

    Each list is split into upcoming and past entries.
    """

    role: UserRole = Field(..., description="Role the dashboard was built for")
    upcoming_bookings: list[BookingSummary] = Field(default_factory=list)
    past_bookings: list[BookingSummary] = Field(default_factory=list)
    upcoming_rides: list[DriverRide] = Field(default_factory=list)
    past_rides: list[DriverRide] = Field(default_factory=list)
