"""
Rides module.

Handles ride search, filtering/sorting of results and ride publishing.

Public API:
- IRideCatalog: Interface for the ride catalog backend
- refine / matches: Pure filter and sort engine
- RideOffer, FilterConfig, SearchCriteria: Search data
- Ride exceptions: RideNotFoundError, MissingSearchCriteriaError, etc.
"""

from .interfaces import IRideCatalog
from .models import (
    SortKey,
    RideStatus,
    DriverRef,
    RideOffer,
    SearchCriteria,
    FilterConfig,
    RideSearchRequest,
    RideSearchResponse,
    CreateRideRequest,
    DriverRide,
    PopularRoute,
)
from .filtering import matches, refine
from .exceptions import (
    RideNotFoundError,
    MissingSearchCriteriaError,
    RideValidationError,
)

__all__ = [
    # Interface
    "IRideCatalog",
    # Models
    "SortKey",
    "RideStatus",
    "DriverRef",
    "RideOffer",
    "SearchCriteria",
    "FilterConfig",
    "RideSearchRequest",
    "RideSearchResponse",
    "CreateRideRequest",
    "DriverRide",
    "PopularRoute",
    # Filter engine
    "matches",
    "refine",
    # Exceptions
    "RideNotFoundError",
    "MissingSearchCriteriaError",
    "RideValidationError",
]
