"""
Rides module exceptions.

These exceptions are raised by the rides module and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from shared.exceptions import NotFoundError, ValidationError


class RideNotFoundError(NotFoundError):
    """Raised when a ride ID is unknown to the catalog."""

    def __init__(self, ride_id: str):
        super().__init__(
            f"Ride not found: {ride_id}",
            code="RIDE_NOT_FOUND",
            details={"ride_id": ride_id},
        )


class MissingSearchCriteriaError(ValidationError):
    """Raised when a search lacks a source or destination."""

    def __init__(self, missing_fields: list[str]):
        super().__init__(
            "Please enter both source and destination",
            code="MISSING_SEARCH_CRITERIA",
            details={"fields": missing_fields},
        )


class RideValidationError(ValidationError):
    """Raised when a ride to publish is incomplete or invalid."""

    def __init__(self, fields: list[str], message: str = "Please fill in all required fields"):
        super().__init__(
            message,
            code="RIDE_INVALID",
            details={"fields": fields},
        )
        self.fields = fields
