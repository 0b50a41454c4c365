"""
Dashboard service implementation.
"""

from typing import Optional

from shared.models import Identity, UserRole
from shared.timeouts import with_timeout
from modules.auth.exceptions import AuthRequiredError
from modules.bookings.interfaces import IBookingHistory
from modules.bookings.models import BookingStatus
from modules.rides.interfaces import IRideCatalog
from modules.rides.models import RideStatus

from .interfaces import IDashboardService
from .models import Dashboard


class DashboardService(IDashboardService):
    """
    Dashboard built from the booking history and the ride catalog.

    Confirmed bookings and upcoming rides are "upcoming"; every other
    status counts as past.
    """

    def __init__(
        self,
        catalog: IRideCatalog,
        history: IBookingHistory,
        timeout: Optional[float] = None,
    ):
        self._catalog = catalog
        self._history = history
        self._timeout = timeout

    async def get_dashboard(self, identity: Optional[Identity]) -> Dashboard:
        """Collect and split the user's bookings and rides."""
        if identity is None:
            raise AuthRequiredError("viewing the dashboard")

        bookings = await with_timeout(
            self._history.list_bookings(identity.id),
            service="booking history",
            timeout=self._timeout,
        )

        rides = []
        if identity.role == UserRole.DRIVER:
            rides = await with_timeout(
                self._catalog.list_driver_rides(identity.id),
                service="ride catalog",
                timeout=self._timeout,
            )

        return Dashboard(
            role=identity.role,
            upcoming_bookings=[b for b in bookings if b.booking.status == BookingStatus.CONFIRMED],
            past_bookings=[b for b in bookings if b.booking.status != BookingStatus.CONFIRMED],
            upcoming_rides=[r for r in rides if r.status == RideStatus.UPCOMING],
            past_rides=[r for r in rides if r.status != RideStatus.UPCOMING],
        )
