"""
Authentication module exceptions.

These exceptions are raised by the auth module and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from shared.exceptions import AuthenticationError, AuthorizationError, ValidationError


class InvalidCredentialsError(AuthenticationError):
    """Raised when credentials are empty or rejected by the authenticator."""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message, code="INVALID_CREDENTIALS")


class AuthRequiredError(AuthenticationError):
    """Raised when an action needs a logged-in session."""

    def __init__(self, action: str = "this action"):
        super().__init__(
            f"Please log in to perform {action}",
            code="AUTH_REQUIRED",
            details={"action": action},
        )


class RegistrationValidationError(ValidationError):
    """Raised when required registration fields are missing or invalid."""

    def __init__(self, missing_fields: list[str], message: str = "Missing required fields"):
        super().__init__(
            f"{message}: {', '.join(missing_fields)}",
            code="REGISTRATION_INVALID",
            details={"fields": missing_fields},
        )
        self.missing_fields = missing_fields


class DriverRequiredError(AuthorizationError):
    """Raised when an action is reserved for driver accounts."""

    def __init__(self, user_role: str):
        super().__init__(
            "You need to have a driver account to perform this action",
            code="DRIVER_REQUIRED",
            details={"required_role": "driver", "user_role": user_role},
        )
