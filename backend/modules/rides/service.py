"""
Ride service implementation.

Validates search and publish requests, gates publishing on the driver
capability and forwards everything else to the ride catalog backend.
"""

import logging
from datetime import date
from typing import Callable, Optional

from shared.models import Identity, UserRole
from shared.timeouts import with_timeout
from modules.auth.exceptions import AuthRequiredError, DriverRequiredError

from .interfaces import IRideCatalog
from .filtering import refine
from .models import (
    CreateRideRequest,
    DriverRide,
    PopularRoute,
    RideOffer,
    RideSearchRequest,
    RideSearchResponse,
    SearchCriteria,
)
from .exceptions import MissingSearchCriteriaError, RideValidationError

logger = logging.getLogger(__name__)

CATALOG_SERVICE = "ride catalog"

REQUIRED_RIDE_FIELDS = (
    "source",
    "destination",
    "date",
    "departure_time",
    "price_per_seat",
    "vehicle_model",
    "vehicle_color",
)


def _is_blank(value: object) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


class RideService:
    """
    Ride search and publishing on top of an IRideCatalog.

    Every catalog call is bounded by the request timeout.
    """

    def __init__(
        self,
        catalog: IRideCatalog,
        timeout: Optional[float] = None,
        today: Callable[[], date] = date.today,
    ):
        self._catalog = catalog
        self._timeout = timeout
        self._today = today

    async def search(self, criteria: SearchCriteria) -> list[RideOffer]:
        """
        Fetch the candidate set for a route.

        Raises:
            MissingSearchCriteriaError: If source or destination is blank
        """
        missing = [
            field for field in ("source", "destination") if _is_blank(getattr(criteria, field))
        ]
        if missing:
            raise MissingSearchCriteriaError(missing)

        return await with_timeout(
            self._catalog.search(
                criteria.source.strip(),
                criteria.destination.strip(),
                criteria.date,
            ),
            service=CATALOG_SERVICE,
            timeout=self._timeout,
        )

    async def search_and_refine(self, request: RideSearchRequest) -> RideSearchResponse:
        """Search, then apply the filter panel state in one step."""
        candidates = await self.search(request.criteria())
        return RideSearchResponse(
            criteria=request.criteria(),
            filters=request.filters,
            total_candidates=len(candidates),
            rides=refine(candidates, request.filters),
        )

    async def get_ride(self, ride_id: str) -> RideOffer:
        """Fetch the latest state of an offer."""
        return await with_timeout(
            self._catalog.get_ride(ride_id),
            service=CATALOG_SERVICE,
            timeout=self._timeout,
        )

    async def create_ride(
        self,
        identity: Optional[Identity],
        request: CreateRideRequest,
    ) -> DriverRide:
        """
        Publish a ride for the current driver.

        Raises:
            AuthRequiredError: If the session is anonymous
            DriverRequiredError: If the identity is not a driver
            RideValidationError: If required fields are missing or the date is past
        """
        if identity is None:
            raise AuthRequiredError("creating a ride")
        if identity.role != UserRole.DRIVER:
            raise DriverRequiredError(identity.role.value)

        missing = [field for field in REQUIRED_RIDE_FIELDS if _is_blank(getattr(request, field))]
        if missing:
            raise RideValidationError(missing)

        if request.date < self._today():
            raise RideValidationError(["date"], message="Ride date cannot be in the past")

        ride = await with_timeout(
            self._catalog.create_ride(identity, request),
            service=CATALOG_SERVICE,
            timeout=self._timeout,
        )
        logger.info("Ride %s created by %s", ride.id, identity.id)
        return ride

    async def popular_routes(self) -> list[PopularRoute]:
        return await with_timeout(
            self._catalog.popular_routes(),
            service=CATALOG_SERVICE,
            timeout=self._timeout,
        )
