import asyncio
import pytest
from decimal import Decimal
from unittest.mock import AsyncMock

from shared.exceptions import NetworkError, RequestTimeoutError
from modules.auth.exceptions import AuthRequiredError
from modules.bookings.exceptions import InsufficientSeatsError, InvalidPassengerCountError
from modules.bookings.interfaces import IBookingService
from modules.bookings.models import BookingStatus
from modules.bookings.service import BookingService


class TestBookingService:
    @pytest.fixture
    def catalog(self):
        mock = AsyncMock()
        mock.book.return_value = "BK-1001"
        return mock

    @pytest.fixture
    def service(self, catalog):
        return BookingService(catalog=catalog, timeout=1.0)

    def test_implements_interface(self, service):
        """BookingService should satisfy IBookingService."""
        assert isinstance(service, IBookingService)

    @pytest.mark.asyncio
    async def test_book_two_seats(self, service, catalog, passenger, make_offer):
        """Booking two of three seats at 35 costs 70."""
        offer = make_offer(id="ride-a", price=35, seats=3)

        booking = await service.book(passenger, offer, 2)

        assert booking.id == "BK-1001"
        assert booking.ride_id == "ride-a"
        assert booking.passenger_id == "user-123"
        assert booking.passenger_count == 2
        assert booking.total_price == Decimal(70)
        assert booking.status == BookingStatus.CONFIRMED
        catalog.book.assert_awaited_once_with("ride-a", "user-123", 2)

    @pytest.mark.asyncio
    async def test_offer_is_not_modified(self, service, passenger, make_offer):
        """The caller's offer keeps its seat count."""
        offer = make_offer(seats=3)
        await service.book(passenger, offer, 2)
        assert offer.available_seats == 3

    @pytest.mark.asyncio
    async def test_book_all_remaining_seats(self, service, passenger, make_offer):
        """Booking exactly the remaining seats succeeds."""
        booking = await service.book(passenger, make_offer(seats=2), 2)
        assert booking.passenger_count == 2

    @pytest.mark.asyncio
    async def test_anonymous_rejected(self, service, catalog, make_offer):
        """Booking needs a session."""
        with pytest.raises(AuthRequiredError):
            await service.book(None, make_offer(), 1)
        catalog.book.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("count", [0, -1])
    async def test_invalid_passenger_count(self, service, catalog, passenger, make_offer, count):
        """At least one seat must be requested."""
        with pytest.raises(InvalidPassengerCountError):
            await service.book(passenger, make_offer(), count)
        catalog.book.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_insufficient_seats(self, service, catalog, passenger, make_offer):
        """Requesting more seats than offered fails before any backend call."""
        with pytest.raises(InsufficientSeatsError) as exc_info:
            await service.book(passenger, make_offer(id="ride-c", seats=2), 5)
        assert exc_info.value.details == {"ride_id": "ride-c", "requested": 5, "available": 2}
        catalog.book.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_auth_checked_before_seats(self, service, make_offer):
        """An anonymous over-booking reports the missing login."""
        with pytest.raises(AuthRequiredError):
            await service.book(None, make_offer(seats=1), 5)

    @pytest.mark.asyncio
    async def test_backend_error_propagates(self, service, catalog, passenger, make_offer):
        """Catalog failures reach the caller."""
        catalog.book.side_effect = NetworkError("ride catalog")
        with pytest.raises(NetworkError):
            await service.book(passenger, make_offer(), 1)

    @pytest.mark.asyncio
    async def test_slow_backend_times_out(self, catalog, passenger, make_offer):
        """A booking call slower than the timeout fails."""

        async def slow_book(*args):
            await asyncio.sleep(1)
            return "BK-late"

        catalog.book.side_effect = slow_book
        service = BookingService(catalog=catalog, timeout=0.01)
        with pytest.raises(RequestTimeoutError):
            await service.book(passenger, make_offer(), 1)

    @pytest.mark.asyncio
    async def test_book_last_seat(self, service, passenger, make_offer):
        """One seat left at 30, one passenger: confirmed for 30."""
        booking = await service.book(passenger, make_offer(price=30, seats=1), 1)
        assert booking.status == BookingStatus.CONFIRMED
        assert booking.total_price == Decimal(30)
