"""
Authentication module interface.

Other modules should depend on these protocols, not the concrete implementations.
This enables testing with mocks and swapping the simulated authenticator
for a real identity backend.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import Identity, RegistrationProfile


@runtime_checkable
class IAuthenticator(Protocol):
    """
    External identity backend.

    Owns credential checks and account uniqueness; the session store
    only validates that required fields are present.
    """

    async def authenticate(self, email: str, password: str) -> Identity:
        """
        Check credentials and return the matching identity.

        Raises:
            InvalidCredentialsError: If the credentials are rejected
            NetworkError: If the backend cannot be reached
        """
        ...

    async def create_account(self, profile: RegistrationProfile) -> Identity:
        """
        Create an account from a complete registration profile.

        Raises:
            NetworkError: If the backend cannot be reached
        """
        ...


@runtime_checkable
class ISessionStore(Protocol):
    """
    Interface for a single client session.

    This protocol defines what the presentation layer and the other
    modules may ask of a session.
    """

    def get_identity(self) -> Optional[Identity]:
        """Return the current identity, or None when anonymous."""
        ...

    async def login(self, email: str, password: str) -> Identity:
        """
        Log in and persist the identity.

        Raises:
            InvalidCredentialsError: If credentials are empty or rejected
        """
        ...

    async def register(self, profile: RegistrationProfile) -> Identity:
        """
        Create an account, log it in and persist the identity.

        Raises:
            RegistrationValidationError: If required fields are missing
        """
        ...

    def logout(self) -> None:
        """Clear the persisted identity. Safe to call when anonymous."""
        ...

    @property
    def can_book(self) -> bool:
        """Whether the session may book rides."""
        ...

    @property
    def can_create_ride(self) -> bool:
        """Whether the session may publish rides."""
        ...
