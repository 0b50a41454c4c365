"""
Simulated ride catalog backend.

Stands in for the real marketplace API. Every call waits a fixed latency
and answers from demo data plus whatever has been published or booked
through this instance.
"""

import asyncio
import logging
import re
import uuid
from datetime import date, timedelta
from decimal import Decimal
from typing import Callable, Optional

from shared.config import get_settings
from shared.models import Identity
from modules.bookings.exceptions import InsufficientSeatsError
from modules.bookings.interfaces import IBookingHistory
from modules.bookings.models import (
    BookedRide,
    Booking,
    BookingStatus,
    BookingSummary,
)

from .interfaces import IRideCatalog
from .models import (
    CreateRideRequest,
    DriverRef,
    DriverRide,
    PopularRoute,
    RideOffer,
    RideStatus,
)
from .exceptions import RideNotFoundError

logger = logging.getLogger(__name__)

PLACEHOLDER_AVATAR = "/placeholder-user.jpg"

DEMO_DRIVERS = {
    "driver-1": DriverRef(id="driver-1", display_name="Michael Chen", avatar_url=PLACEHOLDER_AVATAR, rating=4.8, verified=True),
    "driver-2": DriverRef(id="driver-2", display_name="Sarah Johnson", avatar_url=PLACEHOLDER_AVATAR, rating=4.9, verified=True),
    "driver-3": DriverRef(id="driver-3", display_name="David Wilson", avatar_url=PLACEHOLDER_AVATAR, rating=4.6, verified=True),
    "driver-4": DriverRef(id="driver-4", display_name="Emily Rodriguez", avatar_url=PLACEHOLDER_AVATAR, rating=4.7, verified=True),
}

# (id prefix, driver, departure, arrival, price, seats, female_only, model, color)
DEMO_OFFERS = [
    ("ride-1", "driver-1", "08:00", "10:30", "35", 3, False, "Toyota Camry", "Blue"),
    ("ride-2", "driver-2", "09:15", "11:45", "42", 2, True, "Honda Civic", "Silver"),
    ("ride-3", "driver-3", "10:30", "13:00", "28", 4, False, "Ford Focus", "Red"),
    ("ride-4", "driver-4", "12:00", "14:30", "38", 1, True, "Nissan Altima", "Black"),
]

# (id, source, destination, days from today, price, seats, total rides)
DEMO_POPULAR_ROUTES = [
    ("1", "New York", "Boston", 2, "35", 3, 24),
    ("2", "San Francisco", "Los Angeles", 3, "45", 2, 18),
    ("3", "Chicago", "Detroit", 1, "30", 4, 15),
    ("4", "Seattle", "Portland", 4, "25", 3, 12),
]

# (id, source, destination, days from today, departure, price, available, booked, status)
DEMO_DRIVER_RIDES = [
    ("ride-1", "New York", "Boston", 2, "08:00", "35", 2, 1, RideStatus.UPCOMING),
    ("ride-2", "Boston", "New York", 5, "10:30", "35", 3, 0, RideStatus.UPCOMING),
    ("ride-3", "New York", "Philadelphia", -3, "09:15", "25", 0, 3, RideStatus.COMPLETED),
]

# (id, ride id, source, destination, days from today, departure, driver, passengers, total, status)
DEMO_BOOKINGS = [
    ("booking-1", "ride-4", "Chicago", "Detroit", 1, "14:00", "driver-1", 1, "30", BookingStatus.CONFIRMED),
    ("booking-2", "ride-5", "San Francisco", "Los Angeles", -7, "07:30", "driver-2", 2, "90", BookingStatus.COMPLETED),
]


def _same_place(a: str, b: str) -> bool:
    return a.strip().casefold() == b.strip().casefold()


def _slug(value: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", value.strip().casefold()).strip("-")


def demo_ride_id(prefix: str, source: str, destination: str, travel_date: date) -> str:
    """ID of a demo offer, unique per route and date."""
    return f"{prefix}-{_slug(source)}-{_slug(destination)}-{travel_date.isoformat()}"


class SimulatedRideCatalog(IRideCatalog, IBookingHistory):
    """
    In-memory ride catalog with fixed latency.

    Searches return the four demo offers stamped with the requested route
    and date, followed by any ride published on that route and date. Demo
    offer IDs include the route and date, so each route keeps its own seat
    counts. Sold-out offers are left out of search results but can still
    be fetched by ID.
    """

    def __init__(
        self,
        latency: Optional[float] = None,
        search_latency: Optional[float] = None,
        today: Callable[[], date] = date.today,
    ):
        settings = get_settings()
        self._latency = latency if latency is not None else settings.simulated_latency_seconds
        self._search_latency = (
            search_latency if search_latency is not None else settings.search_latency_seconds
        )
        self._today = today

        self._offers: dict[str, RideOffer] = {}
        self._published: dict[str, RideOffer] = {}
        self._booked_seats: dict[str, int] = {}
        self._bookings: dict[str, list[BookingSummary]] = {}

    async def _wait(self, seconds: float) -> None:
        if seconds > 0:
            await asyncio.sleep(seconds)

    async def search(
        self,
        source: str,
        destination: str,
        date: Optional[date] = None,
    ) -> list[RideOffer]:
        """Return demo offers for the route plus matching published rides."""
        await self._wait(self._search_latency)
        travel_date = date or self._today()

        offers = [
            self._demo_offer(row, source, destination, travel_date) for row in DEMO_OFFERS
        ]
        offers.extend(
            offer
            for offer in self._published.values()
            if offer.date == travel_date
            and _same_place(offer.source, source)
            and _same_place(offer.destination, destination)
        )

        # Sold-out offers are not listed
        offers = [offer for offer in offers if offer.available_seats > 0]
        logger.debug("Search %s -> %s on %s: %d offers", source, destination, travel_date, len(offers))
        return offers

    def _demo_offer(
        self,
        row: tuple,
        source: str,
        destination: str,
        travel_date: date,
    ) -> RideOffer:
        """Serve a demo offer, keeping any seats already booked on it."""
        prefix, driver_id, departure, arrival, price, seats, female_only, model, color = row
        ride_id = demo_ride_id(prefix, source, destination, travel_date)
        offer = self._offers.get(ride_id)
        if offer is None:
            offer = RideOffer(
                id=ride_id,
                driver=DEMO_DRIVERS[driver_id],
                source=source,
                destination=destination,
                date=travel_date,
                departure_time=departure,
                arrival_time=arrival,
                price_per_seat=Decimal(price),
                available_seats=seats,
                female_only=female_only,
                vehicle_model=model,
                vehicle_color=color,
            )
            self._offers[ride_id] = offer
        return offer

    async def get_ride(self, ride_id: str) -> RideOffer:
        await self._wait(self._latency)
        try:
            return self._offers[ride_id]
        except KeyError:
            raise RideNotFoundError(ride_id)

    async def book(
        self,
        ride_id: str,
        passenger_id: str,
        passenger_count: int,
    ) -> str:
        """Reserve seats and remember the booking for the passenger's dashboard."""
        await self._wait(self._latency)

        offer = self._offers.get(ride_id)
        if offer is None:
            raise RideNotFoundError(ride_id)
        if passenger_count > offer.available_seats:
            raise InsufficientSeatsError(ride_id, passenger_count, offer.available_seats)

        remaining = offer.model_copy(
            update={"available_seats": offer.available_seats - passenger_count}
        )
        self._offers[ride_id] = remaining
        if ride_id in self._published:
            self._published[ride_id] = remaining
        self._booked_seats[ride_id] = self._booked_seats.get(ride_id, 0) + passenger_count

        reference = f"booking-{uuid.uuid4().hex[:8]}"
        summary = BookingSummary(
            booking=Booking(
                id=reference,
                ride_id=ride_id,
                passenger_id=passenger_id,
                passenger_count=passenger_count,
                total_price=offer.price_per_seat * passenger_count,
                status=BookingStatus.CONFIRMED,
            ),
            ride=BookedRide(
                id=ride_id,
                source=offer.source,
                destination=offer.destination,
                date=offer.date,
                departure_time=offer.departure_time,
                driver=offer.driver,
            ),
        )
        self._bookings.setdefault(passenger_id, []).insert(0, summary)
        return reference

    async def create_ride(
        self,
        driver: Identity,
        request: CreateRideRequest,
    ) -> DriverRide:
        """Publish a ride so later searches on its route and date return it."""
        await self._wait(self._search_latency)

        offer = RideOffer(
            id=f"ride-{uuid.uuid4().hex[:8]}",
            driver=DriverRef(
                id=driver.id,
                display_name=driver.display_name,
                avatar_url=driver.avatar_url,
            ),
            source=request.source,
            destination=request.destination,
            date=request.date,
            departure_time=request.departure_time,
            arrival_time=request.arrival_time,
            price_per_seat=request.price_per_seat,
            available_seats=request.available_seats,
            female_only=request.female_only,
            vehicle_model=request.vehicle_model,
            vehicle_color=request.vehicle_color,
        )
        self._published[offer.id] = offer
        self._offers[offer.id] = offer
        logger.info("Driver %s published %s", driver.id, offer.id)
        return self._to_driver_ride(offer)

    async def list_driver_rides(self, driver_id: str) -> list[DriverRide]:
        await self._wait(self._latency)
        today = self._today()

        rides = [
            self._to_driver_ride(offer)
            for offer in self._published.values()
            if offer.driver.id == driver_id
        ]
        rides.extend(
            DriverRide(
                id=ride_id,
                source=source,
                destination=destination,
                date=today + timedelta(days=days),
                departure_time=departure,
                price_per_seat=Decimal(price),
                available_seats=available,
                booked_seats=booked,
                status=status,
            )
            for ride_id, source, destination, days, departure, price, available, booked, status in DEMO_DRIVER_RIDES
        )
        return rides

    async def list_bookings(self, user_id: str) -> list[BookingSummary]:
        await self._wait(self._latency)
        today = self._today()

        bookings = list(self._bookings.get(user_id, []))
        bookings.extend(
            BookingSummary(
                booking=Booking(
                    id=booking_id,
                    ride_id=ride_id,
                    passenger_id=user_id,
                    passenger_count=passengers,
                    total_price=Decimal(total),
                    status=status,
                ),
                ride=BookedRide(
                    id=ride_id,
                    source=source,
                    destination=destination,
                    date=today + timedelta(days=days),
                    departure_time=departure,
                    driver=DEMO_DRIVERS[driver_id],
                ),
            )
            for booking_id, ride_id, source, destination, days, departure, driver_id, passengers, total, status in DEMO_BOOKINGS
        )
        return bookings

    async def popular_routes(self) -> list[PopularRoute]:
        await self._wait(self._latency)
        today = self._today()

        return [
            PopularRoute(
                id=route_id,
                source=source,
                destination=destination,
                date=today + timedelta(days=days),
                price_per_seat=Decimal(price),
                available_seats=seats,
                total_rides=total_rides,
            )
            for route_id, source, destination, days, price, seats, total_rides in DEMO_POPULAR_ROUTES
        ]

    def _to_driver_ride(self, offer: RideOffer) -> DriverRide:
        status = RideStatus.UPCOMING if offer.date >= self._today() else RideStatus.COMPLETED
        return DriverRide(
            id=offer.id,
            source=offer.source,
            destination=offer.destination,
            date=offer.date,
            departure_time=offer.departure_time,
            price_per_seat=offer.price_per_seat,
            available_seats=offer.available_seats,
            booked_seats=self._booked_seats.get(offer.id, 0),
            status=status,
        )
