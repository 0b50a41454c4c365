"""
Dashboard module interface.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import Identity

from .models import Dashboard


@runtime_checkable
class IDashboardService(Protocol):
    """Interface for building a user's dashboard."""

    async def get_dashboard(self, identity: Optional[Identity]) -> Dashboard:
        """
        Collect the user's bookings and driver rides.

        Raises:
            AuthRequiredError: If identity is None
        """
        ...
