"""
Dashboard API endpoints.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_dashboard_service, get_session_store
from modules.auth.service import SessionStore

from .interfaces import IDashboardService
from .models import Dashboard

router = APIRouter()


@router.get("", response_model=Dashboard)
async def get_dashboard(
    session: SessionStore = Depends(get_session_store),
    service: IDashboardService = Depends(get_dashboard_service),
) -> Dashboard:
    """Upcoming and past bookings, plus rides for drivers."""
    return await service.get_dashboard(session.get_identity())
