"""
Ride API endpoints.

Search with filters, popular routes and ride publishing.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_ride_service, get_session_store
from modules.auth.service import SessionStore

from .models import (
    CreateRideRequest,
    DriverRide,
    PopularRoute,
    RideOffer,
    RideSearchRequest,
    RideSearchResponse,
)
from .service import RideService

router = APIRouter()


@router.post("/search", response_model=RideSearchResponse)
async def search_rides(
    request: RideSearchRequest,
    service: RideService = Depends(get_ride_service),
) -> RideSearchResponse:
    """
    Search rides on a route and apply the filter panel.

    The response carries both the refined rides and the size of the
    unfiltered candidate set.
    """
    return await service.search_and_refine(request)


@router.get("/popular", response_model=list[PopularRoute])
async def popular_routes(
    service: RideService = Depends(get_ride_service),
) -> list[PopularRoute]:
    """Most travelled routes."""
    return await service.popular_routes()


@router.post("", response_model=DriverRide, status_code=201)
async def create_ride(
    request: CreateRideRequest,
    session: SessionStore = Depends(get_session_store),
    service: RideService = Depends(get_ride_service),
) -> DriverRide:
    """
    Publish a ride. Requires a driver session.
    """
    return await service.create_ride(session.get_identity(), request)


@router.get("/{ride_id}", response_model=RideOffer)
async def get_ride(
    ride_id: str,
    service: RideService = Depends(get_ride_service),
) -> RideOffer:
    """Latest state of a ride offer."""
    return await service.get_ride(ride_id)
