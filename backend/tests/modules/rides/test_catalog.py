"""Tests for the simulated ride catalog."""

import pytest
from datetime import date, timedelta
from decimal import Decimal

from modules.bookings.exceptions import InsufficientSeatsError
from modules.bookings.models import BookingStatus
from modules.rides.catalog import SimulatedRideCatalog, demo_ride_id
from modules.rides.exceptions import RideNotFoundError
from modules.rides.interfaces import IRideCatalog
from modules.rides.models import CreateRideRequest, RideStatus


TODAY = date(2030, 6, 1)


def _ab_ride(prefix: str) -> str:
    return demo_ride_id(prefix, "A", "B", TODAY)


@pytest.fixture
def catalog() -> SimulatedRideCatalog:
    return SimulatedRideCatalog(latency=0, search_latency=0, today=lambda: TODAY)


def _publish_request(**overrides) -> CreateRideRequest:
    data = {
        "source": "Seattle",
        "destination": "Portland",
        "date": TODAY + timedelta(days=1),
        "departure_time": "07:45",
        "available_seats": 2,
        "price_per_seat": Decimal("25"),
        "vehicle_model": "Subaru Outback",
        "vehicle_color": "Green",
    }
    data.update(overrides)
    return CreateRideRequest(**data)


class TestSimulatedRideCatalog:
    def test_implements_interface(self, catalog):
        """The simulation satisfies IRideCatalog."""
        assert isinstance(catalog, IRideCatalog)

    @pytest.mark.asyncio
    async def test_search_returns_demo_offers_for_route(self, catalog):
        """Demo offers are stamped with the requested route and date."""
        offers = await catalog.search("New York", "Boston", date(2030, 7, 4))
        assert [o.id for o in offers] == [
            "ride-1-new-york-boston-2030-07-04",
            "ride-2-new-york-boston-2030-07-04",
            "ride-3-new-york-boston-2030-07-04",
            "ride-4-new-york-boston-2030-07-04",
        ]
        assert all(o.source == "New York" and o.destination == "Boston" for o in offers)
        assert all(o.date == date(2030, 7, 4) for o in offers)
        assert [o.price_per_seat for o in offers] == [Decimal(35), Decimal(42), Decimal(28), Decimal(38)]
        assert [o.available_seats for o in offers] == [3, 2, 4, 1]
        assert [o.female_only for o in offers] == [False, True, False, True]

    @pytest.mark.asyncio
    async def test_search_defaults_to_today(self, catalog):
        """Without a date the search is for today."""
        offers = await catalog.search("A", "B")
        assert all(o.date == TODAY for o in offers)

    @pytest.mark.asyncio
    async def test_get_ride_after_search(self, catalog):
        """Offers served by a search can be fetched by ID."""
        await catalog.search("A", "B")
        offer = await catalog.get_ride(_ab_ride("ride-3"))
        assert offer.driver.display_name == "David Wilson"

    @pytest.mark.asyncio
    async def test_get_unknown_ride(self, catalog):
        """Unknown ride IDs raise RideNotFoundError."""
        with pytest.raises(RideNotFoundError):
            await catalog.get_ride("ride-404")

    @pytest.mark.asyncio
    async def test_book_reduces_seats_and_records_booking(self, catalog):
        """Booking takes seats from the backend's copy and shows up in history."""
        await catalog.search("A", "B")
        reference = await catalog.book(_ab_ride("ride-1"), "user-1", 2)

        assert reference.startswith("booking-")
        assert (await catalog.get_ride(_ab_ride("ride-1"))).available_seats == 1

        bookings = await catalog.list_bookings("user-1")
        assert bookings[0].booking.id == reference
        assert bookings[0].booking.total_price == Decimal(70)
        assert bookings[0].booking.status == BookingStatus.CONFIRMED
        assert bookings[0].ride.source == "A"

    @pytest.mark.asyncio
    async def test_book_more_than_available(self, catalog):
        """The backend refuses bookings beyond its seat count."""
        await catalog.search("A", "B")
        with pytest.raises(InsufficientSeatsError):
            await catalog.book(_ab_ride("ride-4"), "user-1", 2)

    @pytest.mark.asyncio
    async def test_book_unknown_ride(self, catalog):
        """Booking an unknown ride raises RideNotFoundError."""
        with pytest.raises(RideNotFoundError):
            await catalog.book("ride-404", "user-1", 1)

    @pytest.mark.asyncio
    async def test_routes_keep_separate_offers(self, catalog):
        """A search on another route does not replace earlier offers."""
        boston = await catalog.search("New York", "Boston", TODAY)
        detroit = await catalog.search("Chicago", "Detroit", TODAY + timedelta(days=1))
        assert {o.id for o in boston}.isdisjoint(o.id for o in detroit)

        await catalog.book(boston[0].id, "user-a", 1)

        bookings = await catalog.list_bookings("user-a")
        assert bookings[0].ride.source == "New York"
        assert bookings[0].ride.destination == "Boston"
        assert bookings[0].ride.date == TODAY

    @pytest.mark.asyncio
    async def test_search_again_after_booking(self, catalog):
        """Seats booked on an offer stay booked when it is served again."""
        await catalog.search("A", "B")
        await catalog.book(_ab_ride("ride-1"), "user-1", 2)

        offers = await catalog.search("A", "B")
        seats = {o.id: o.available_seats for o in offers}
        assert seats[_ab_ride("ride-1")] == 1

    @pytest.mark.asyncio
    async def test_sold_out_offer_not_listed(self, catalog):
        """Once the last seat is booked the offer leaves search results."""
        await catalog.search("A", "B")
        await catalog.book(_ab_ride("ride-4"), "user-1", 1)

        offers = await catalog.search("A", "B")
        assert _ab_ride("ride-4") not in [o.id for o in offers]
        assert (await catalog.get_ride(_ab_ride("ride-4"))).available_seats == 0
        with pytest.raises(InsufficientSeatsError):
            await catalog.book(_ab_ride("ride-4"), "user-2", 1)

    @pytest.mark.asyncio
    async def test_published_ride_found_by_search(self, catalog, driver):
        """A published ride is returned by searches on its route and date."""
        ride = await catalog.create_ride(driver, _publish_request())
        assert ride.status == RideStatus.UPCOMING

        offers = await catalog.search("seattle ", "PORTLAND", TODAY + timedelta(days=1))
        published = [o for o in offers if o.id == ride.id]
        assert len(published) == 1
        assert published[0].driver.id == driver.id
        assert published[0].vehicle_model == "Subaru Outback"

        other_day = await catalog.search("Seattle", "Portland", TODAY)
        assert ride.id not in [o.id for o in other_day]

    @pytest.mark.asyncio
    async def test_driver_rides_include_published(self, catalog, driver):
        """Published rides head the driver's list, followed by demo rides."""
        ride = await catalog.create_ride(driver, _publish_request())
        await catalog.book(ride.id, "user-1", 1)

        rides = await catalog.list_driver_rides(driver.id)
        assert rides[0].id == ride.id
        assert rides[0].booked_seats == 1
        assert rides[0].available_seats == 1
        assert {r.id for r in rides[1:]} == {"ride-1", "ride-2", "ride-3"}

    @pytest.mark.asyncio
    async def test_demo_bookings(self, catalog):
        """Every user sees the demo bookings."""
        bookings = await catalog.list_bookings("anyone")
        assert [b.booking.status for b in bookings] == [
            BookingStatus.CONFIRMED,
            BookingStatus.COMPLETED,
        ]
        assert bookings[0].ride.date == TODAY + timedelta(days=1)

    @pytest.mark.asyncio
    async def test_popular_routes(self, catalog):
        """Popular routes are the four demo routes with relative dates."""
        routes = await catalog.popular_routes()
        assert [(r.source, r.destination) for r in routes] == [
            ("New York", "Boston"),
            ("San Francisco", "Los Angeles"),
            ("Chicago", "Detroit"),
            ("Seattle", "Portland"),
        ]
        assert routes[0].date == TODAY + timedelta(days=2)
