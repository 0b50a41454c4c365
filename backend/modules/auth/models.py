"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from typing import Optional
from pydantic import BaseModel, EmailStr, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from shared.models import Identity, UserRole

_email_adapter = TypeAdapter(EmailStr)


def is_valid_email(value: str) -> bool:
    """Check an address against the same rules Identity.email enforces."""
    try:
        _email_adapter.validate_python(value)
    except PydanticValidationError:
        return False
    return True


class LoginRequest(BaseModel):
    """Credentials submitted on the login form."""

    email: str = Field(default="", description="Email address")
    password: str = Field(default="", description="Password")


class RegistrationProfile(BaseModel):
    """
    Data submitted on the registration form.

    Every field is optional at the model level so that missing fields are
    reported by the session store as a single RegistrationValidationError
    rather than a schema error.
    """

    display_name: Optional[str] = Field(None, description="Full name")
    email: Optional[str] = Field(None, description="Email address")
    password: Optional[str] = Field(None, description="Password")
    role: Optional[UserRole] = Field(None, description="driver or passenger")


class Capabilities(BaseModel):
    """UI-visible permissions derived from the current identity."""

    can_book: bool = False
    can_create_ride: bool = False


class SessionState(BaseModel):
    """Snapshot of a session: who is logged in and what they may do."""

    session_id: Optional[str] = Field(None, description="Session this state belongs to")
    identity: Optional[Identity] = Field(None, description="Current identity, if any")
    capabilities: Capabilities = Field(default_factory=Capabilities)


__all__ = [
    "Identity",
    "UserRole",
    "LoginRequest",
    "RegistrationProfile",
    "Capabilities",
    "SessionState",
    "is_valid_email",
]
