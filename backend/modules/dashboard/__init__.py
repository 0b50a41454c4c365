"""
Dashboard module.

Shows a user's upcoming and past bookings and, for drivers, their rides.

Public API:
- IDashboardService: Interface for dashboard operations
- Dashboard: Split lists of bookings and rides
"""

from .interfaces import IDashboardService
from .models import Dashboard

__all__ = [
    "IDashboardService",
    "Dashboard",
]
