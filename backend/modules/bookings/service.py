"""
Booking service implementation.

Checks the capability gate and seat count locally, then asks the ride
catalog backend to reserve the seats.
"""

import logging
from typing import Optional

from shared.models import Identity
from shared.timeouts import with_timeout
from modules.auth.exceptions import AuthRequiredError
from modules.rides.interfaces import IRideCatalog
from modules.rides.models import RideOffer

from .interfaces import IBookingService
from .models import Booking, BookingStatus
from .exceptions import InsufficientSeatsError, InvalidPassengerCountError

logger = logging.getLogger(__name__)


class BookingService(IBookingService):
    """
    Booking action backed by the ride catalog.

    The offer passed in is never modified. After a successful booking its
    available_seats is stale and the caller is expected to search again.
    """

    def __init__(self, catalog: IRideCatalog, timeout: Optional[float] = None):
        self._catalog = catalog
        self._timeout = timeout

    async def book(
        self,
        identity: Optional[Identity],
        offer: RideOffer,
        passenger_count: int,
    ) -> Booking:
        """Book seats on an offer for the session's identity."""
        if identity is None:
            raise AuthRequiredError("booking a ride")

        if passenger_count < 1:
            raise InvalidPassengerCountError(passenger_count)

        if passenger_count > offer.available_seats:
            raise InsufficientSeatsError(
                ride_id=offer.id,
                requested=passenger_count,
                available=offer.available_seats,
            )

        reference = await with_timeout(
            self._catalog.book(offer.id, identity.id, passenger_count),
            service="ride catalog",
            timeout=self._timeout,
        )

        booking = Booking(
            id=reference,
            ride_id=offer.id,
            passenger_id=identity.id,
            passenger_count=passenger_count,
            total_price=offer.price_per_seat * passenger_count,
            status=BookingStatus.CONFIRMED,
        )
        logger.info(
            "Booking %s confirmed: %d seat(s) on %s for %s",
            booking.id,
            passenger_count,
            offer.id,
            identity.id,
        )
        return booking
