"""
Booking API endpoints.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_booking_service, get_ride_service, get_session_store
from modules.auth.service import SessionStore
from modules.rides.service import RideService

from .interfaces import IBookingService
from .models import Booking, BookingRequest

router = APIRouter()


@router.post("", response_model=Booking, status_code=201)
async def book_ride(
    request: BookingRequest,
    session: SessionStore = Depends(get_session_store),
    rides: RideService = Depends(get_ride_service),
    service: IBookingService = Depends(get_booking_service),
) -> Booking:
    """
    Book seats on a ride.

    Seat availability is checked against the catalog's latest offer.
    Clients should search again afterwards to see updated seat counts.
    """
    identity = session.require_identity("booking a ride")
    offer = await rides.get_ride(request.ride_id)
    return await service.book(identity, offer, request.passenger_count)
