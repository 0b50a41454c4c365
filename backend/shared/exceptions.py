"""
Base exception classes for the Carpool backend.

Each module should define its own exceptions that inherit from these bases.
This enables consistent error handling across the application.
"""

from typing import Optional, Any


class CarpoolError(Exception):
    """
    Base exception for all Carpool errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(CarpoolError):
    """Resource not found."""

    pass


class ValidationError(CarpoolError):
    """Input validation failed."""

    pass


class AuthenticationError(CarpoolError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class AuthorizationError(CarpoolError):
    """Authorization failed (insufficient permissions)."""

    pass


class ExternalServiceError(CarpoolError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service


class NetworkError(ExternalServiceError):
    """An external collaborator could not be reached."""

    def __init__(self, service: str, message: Optional[str] = None):
        super().__init__(
            message or f"Could not reach {service}",
            service=service,
            code="NETWORK_ERROR",
        )


class RequestTimeoutError(ExternalServiceError):
    """An external collaborator did not answer within the configured timeout."""

    def __init__(self, service: str, timeout: float):
        super().__init__(
            f"{service} did not respond within {timeout:g}s",
            service=service,
            code="TIMEOUT",
            details={"timeout_seconds": timeout},
        )
