"""
Authentication module.

Handles session identity, login/registration and capability gates.

Public API:
- ISessionStore: Interface for a client session
- IAuthenticator: Interface for the external identity backend
- Identity: The logged-in user of a session
- Auth exceptions: InvalidCredentialsError, AuthRequiredError, etc.
"""

from .interfaces import IAuthenticator, ISessionStore
from .models import (
    Identity,
    UserRole,
    LoginRequest,
    RegistrationProfile,
    Capabilities,
    SessionState,
)
from .exceptions import (
    InvalidCredentialsError,
    AuthRequiredError,
    RegistrationValidationError,
    DriverRequiredError,
)

__all__ = [
    # Interfaces
    "IAuthenticator",
    "ISessionStore",
    # Models
    "Identity",
    "UserRole",
    "LoginRequest",
    "RegistrationProfile",
    "Capabilities",
    "SessionState",
    # Exceptions
    "InvalidCredentialsError",
    "AuthRequiredError",
    "RegistrationValidationError",
    "DriverRequiredError",
]
