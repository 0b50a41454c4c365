"""
Simulated identity backend.

Stands in for the real account service until one exists. Every call waits
a fixed latency, then answers from an in-memory account table.
"""

import asyncio
import logging
import uuid
from typing import Optional

from shared.config import get_settings

from .interfaces import IAuthenticator
from .models import Identity, RegistrationProfile, UserRole, is_valid_email
from .exceptions import InvalidCredentialsError

logger = logging.getLogger(__name__)


# Identity returned for any unknown account with non-empty credentials
DEMO_USER_ID = "user-123"
DEMO_DISPLAY_NAME = "John Doe"


class SimulatedAuthenticator(IAuthenticator):
    """
    In-memory authenticator with fixed latency.

    Accounts created through create_account are remembered and their
    passwords checked on login. Any other well-formed email logs in as
    the demo passenger.
    """

    def __init__(self, latency: Optional[float] = None):
        self._latency = (
            latency if latency is not None else get_settings().simulated_latency_seconds
        )
        self._accounts: dict[str, tuple[str, Identity]] = {}

    async def _simulate_latency(self) -> None:
        if self._latency > 0:
            await asyncio.sleep(self._latency)

    async def authenticate(self, email: str, password: str) -> Identity:
        """Check credentials against the account table."""
        await self._simulate_latency()

        if not email or not password or not is_valid_email(email):
            raise InvalidCredentialsError()

        account = self._accounts.get(email.lower())
        if account is not None:
            stored_password, identity = account
            if password != stored_password:
                raise InvalidCredentialsError()
            return identity

        return Identity(
            id=DEMO_USER_ID,
            display_name=DEMO_DISPLAY_NAME,
            email=email,
            role=UserRole.PASSENGER,
        )

    async def create_account(self, profile: RegistrationProfile) -> Identity:
        """Create and remember an account. Emails are not checked for uniqueness."""
        await self._simulate_latency()

        identity = Identity(
            id=f"user-{uuid.uuid4().hex[:8]}",
            display_name=profile.display_name,
            email=profile.email,
            role=profile.role,
        )
        self._accounts[profile.email.lower()] = (profile.password, identity)
        logger.debug("Created account %s (%s)", identity.id, identity.role.value)
        return identity
