"""
Session store implementation.

Holds the identity of one client session, persists it in a key-value slot
and derives the capability gates the rest of the application checks.
"""

import logging
from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from shared.config import get_settings
from shared.storage import IKeyValueStore
from shared.timeouts import with_timeout

from .interfaces import IAuthenticator, ISessionStore
from .models import (
    Capabilities,
    Identity,
    RegistrationProfile,
    SessionState,
    UserRole,
    is_valid_email,
)
from .exceptions import (
    AuthRequiredError,
    InvalidCredentialsError,
    RegistrationValidationError,
)

logger = logging.getLogger(__name__)

REQUIRED_REGISTRATION_FIELDS = ("display_name", "email", "password", "role")
SELF_REGISTERABLE_ROLES = (UserRole.DRIVER, UserRole.PASSENGER)


class SessionStore(ISessionStore):
    """
    Identity holder for a single client session.

    One instance is created per session and passed to whatever needs it.
    The persisted slot is read once at construction; afterwards the
    in-memory identity is authoritative and every change is written through.
    """

    def __init__(
        self,
        authenticator: IAuthenticator,
        storage: IKeyValueStore,
        storage_key: Optional[str] = None,
        session_id: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self._authenticator = authenticator
        self._storage = storage
        self._storage_key = storage_key or get_settings().session_storage_key
        self._session_id = session_id
        self._timeout = timeout
        self._identity: Optional[Identity] = None
        self.restore()

    @property
    def session_id(self) -> Optional[str]:
        return self._session_id

    def restore(self) -> Optional[Identity]:
        """
        Load the identity from the persisted slot.

        A record that no longer parses is deleted and the session
        starts anonymous.
        """
        raw = self._storage.get(self._storage_key)
        if raw is None:
            self._identity = None
            return None

        try:
            self._identity = Identity.model_validate_json(raw)
        except PydanticValidationError:
            logger.warning(
                "Discarding unreadable session record under key %r", self._storage_key
            )
            self._storage.delete(self._storage_key)
            self._identity = None

        return self._identity

    def get_identity(self) -> Optional[Identity]:
        """Return the current identity, or None when anonymous."""
        return self._identity

    def require_identity(self, action: str = "this action") -> Identity:
        """
        Return the current identity or fail.

        Raises:
            AuthRequiredError: If the session is anonymous
        """
        if self._identity is None:
            raise AuthRequiredError(action)
        return self._identity

    async def login(self, email: str, password: str) -> Identity:
        """Authenticate and persist the resulting identity."""
        if not email or not password:
            raise InvalidCredentialsError("Email and password are required")

        identity = await with_timeout(
            self._authenticator.authenticate(email, password),
            service="authenticator",
            timeout=self._timeout,
        )
        self._persist(identity)
        logger.info("User %s logged in", identity.id)
        return identity

    async def register(self, profile: RegistrationProfile) -> Identity:
        """Validate the profile, create the account and persist the identity."""
        missing = [
            field for field in REQUIRED_REGISTRATION_FIELDS if not getattr(profile, field)
        ]
        if missing:
            raise RegistrationValidationError(missing)

        invalid = []
        if not is_valid_email(profile.email):
            invalid.append("email")
        if profile.role not in SELF_REGISTERABLE_ROLES:
            invalid.append("role")
        if invalid:
            raise RegistrationValidationError(invalid, message="Invalid fields")

        identity = await with_timeout(
            self._authenticator.create_account(profile),
            service="authenticator",
            timeout=self._timeout,
        )
        self._persist(identity)
        logger.info("Registered %s %s", identity.role.value, identity.id)
        return identity

    def logout(self) -> None:
        """Clear the identity and its persisted slot."""
        if self._identity is not None:
            logger.info("User %s logged out", self._identity.id)
        self._identity = None
        self._storage.delete(self._storage_key)

    @property
    def can_book(self) -> bool:
        return self._identity is not None

    @property
    def can_create_ride(self) -> bool:
        return self._identity is not None and self._identity.role == UserRole.DRIVER

    def state(self) -> SessionState:
        """Snapshot of identity and capabilities for the presentation layer."""
        return SessionState(
            session_id=self._session_id,
            identity=self._identity,
            capabilities=Capabilities(
                can_book=self.can_book,
                can_create_ride=self.can_create_ride,
            ),
        )

    def _persist(self, identity: Identity) -> None:
        self._identity = identity
        self._storage.set(self._storage_key, identity.model_dump_json())
