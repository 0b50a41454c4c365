"""
Rides module data models.

These models define ride offers, the search/filter configuration and the
driver-side views of published rides.
"""

from datetime import date as Date
from decimal import Decimal
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, computed_field, model_validator

# Zero-padded 24h clock time. Plain string comparison orders these
# chronologically, which the departure-time sort relies on.
CLOCK_TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"

DEFAULT_PRICE_RANGE = (Decimal(0), Decimal(100))

MAX_PUBLISHED_SEATS = 6


class SortKey(str, Enum):
    """Order applied to refined search results."""

    PRICE = "price"                      # Cheapest first
    DEPARTURE_TIME = "departure_time"    # Earliest first
    AVAILABLE_SEATS = "available_seats"  # Most seats first


class RideStatus(str, Enum):
    """Lifecycle of a ride as seen by its driver."""

    UPCOMING = "upcoming"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class DriverRef(BaseModel):
    """Public profile of the driver offering a ride."""

    id: str = Field(..., description="Driver user ID")
    display_name: str = Field(..., description="Driver name")
    avatar_url: Optional[str] = Field(None, description="Avatar URL")
    rating: float = Field(default=0.0, ge=0.0, le=5.0, description="Average rating")
    verified: bool = Field(default=False, description="Whether the driver is verified")

    model_config = {"frozen": True}


class RideOffer(BaseModel):
    """
    A ride returned by a catalog search.

    Offers are snapshots: they are regenerated on every search and never
    updated in place, so available_seats may be stale after a booking.
    """

    id: str = Field(..., description="Ride ID")
    driver: DriverRef
    source: str = Field(..., description="Departure city or location")
    destination: str = Field(..., description="Arrival city or location")
    date: Date = Field(..., description="Travel date")
    departure_time: str = Field(..., pattern=CLOCK_TIME_PATTERN)
    arrival_time: Optional[str] = Field(None, pattern=CLOCK_TIME_PATTERN)
    price_per_seat: Decimal = Field(..., ge=0, description="Price per seat")
    available_seats: int = Field(..., ge=0, description="Seats still free")
    female_only: bool = Field(default=False, description="Female passengers only")
    vehicle_model: str = Field(..., description="Car model")
    vehicle_color: str = Field(..., description="Car color")

    model_config = {"frozen": True}


class SearchCriteria(BaseModel):
    """Route and date the user is searching for."""

    source: str = Field(default="", description="Departure city or location")
    destination: str = Field(default="", description="Arrival city or location")
    date: Optional[Date] = Field(None, description="Travel date; today when omitted")


class FilterConfig(BaseModel):
    """
    Client-side narrowing and ordering of a candidate set.

    Defaults match an untouched filter panel.
    """

    price_range: tuple[Decimal, Decimal] = Field(
        default=DEFAULT_PRICE_RANGE,
        description="Inclusive (min, max) price per seat",
    )
    female_only_required: bool = Field(
        default=False,
        description="Only keep female-only rides",
    )
    min_seats: int = Field(default=1, ge=1, description="Minimum available seats")
    sort_key: SortKey = Field(default=SortKey.PRICE, description="Result order")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_price_range(self) -> "FilterConfig":
        low, high = self.price_range
        if low < 0:
            raise ValueError("price_range minimum must not be negative")
        if low > high:
            raise ValueError("price_range minimum must not exceed maximum")
        return self


class RideSearchRequest(SearchCriteria):
    """Search criteria plus the filter panel state."""

    filters: FilterConfig = Field(default_factory=FilterConfig)

    def criteria(self) -> SearchCriteria:
        return SearchCriteria(source=self.source, destination=self.destination, date=self.date)


class RideSearchResponse(BaseModel):
    """Refined view of a search."""

    criteria: SearchCriteria
    filters: FilterConfig
    total_candidates: int = Field(..., description="Offers before filtering")
    rides: list[RideOffer] = Field(default_factory=list)

    @computed_field
    @property
    def count(self) -> int:
        return len(self.rides)


class CreateRideRequest(BaseModel):
    """
    Ride published by a driver.

    Required fields are optional at the model level so that the service
    can report every missing one at once.
    """

    source: Optional[str] = Field(None, description="Departure city or location")
    destination: Optional[str] = Field(None, description="Arrival city or location")
    date: Optional[Date] = Field(None, description="Travel date")
    departure_time: Optional[str] = Field(None, pattern=CLOCK_TIME_PATTERN)
    arrival_time: Optional[str] = Field(None, pattern=CLOCK_TIME_PATTERN)
    available_seats: int = Field(default=3, ge=1, le=MAX_PUBLISHED_SEATS)
    price_per_seat: Optional[Decimal] = Field(None, ge=1, description="Price per seat")
    vehicle_model: Optional[str] = Field(None, description="Car model")
    vehicle_color: Optional[str] = Field(None, description="Car color")
    female_only: bool = Field(default=False)
    description: Optional[str] = Field(None, max_length=2000)


class DriverRide(BaseModel):
    """A ride as listed on its driver's dashboard."""

    id: str = Field(..., description="Ride ID")
    source: str
    destination: str
    date: Date
    departure_time: str = Field(..., pattern=CLOCK_TIME_PATTERN)
    price_per_seat: Decimal = Field(..., ge=0)
    available_seats: int = Field(..., ge=0)
    booked_seats: int = Field(default=0, ge=0)
    status: RideStatus = Field(default=RideStatus.UPCOMING)


class PopularRoute(BaseModel):
    """Frequently travelled route shown on the landing page."""

    id: str
    source: str
    destination: str
    date: Date = Field(..., description="Next departure on this route")
    price_per_seat: Decimal = Field(..., ge=0)
    available_seats: int = Field(..., ge=0)
    total_rides: int = Field(..., ge=0)
