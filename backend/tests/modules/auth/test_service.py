import asyncio
import pytest
from unittest.mock import AsyncMock

from shared.exceptions import RequestTimeoutError
from shared.storage import InMemoryKeyValueStore
from modules.auth.authenticator import SimulatedAuthenticator
from modules.auth.exceptions import (
    AuthRequiredError,
    InvalidCredentialsError,
    RegistrationValidationError,
)
from modules.auth.models import Identity, RegistrationProfile, UserRole
from modules.auth.service import SessionStore


STORAGE_KEY = "user"


class TestSessionStore:
    @pytest.fixture
    def authenticator(self):
        return SimulatedAuthenticator(latency=0)

    @pytest.fixture
    def store(self, authenticator, storage):
        return SessionStore(authenticator, storage, storage_key=STORAGE_KEY, session_id="s1")

    @pytest.fixture
    def driver_profile(self):
        return RegistrationProfile(
            display_name="Dana Driver",
            email="dana@example.com",
            password="secret",
            role=UserRole.DRIVER,
        )

    def test_starts_anonymous(self, store):
        """A fresh session has no identity and no capabilities."""
        assert store.get_identity() is None
        assert store.can_book is False
        assert store.can_create_ride is False

    def test_require_identity_when_anonymous(self, store):
        """require_identity should fail for anonymous sessions."""
        with pytest.raises(AuthRequiredError) as exc_info:
            store.require_identity("booking a ride")
        assert exc_info.value.details == {"action": "booking a ride"}

    @pytest.mark.asyncio
    async def test_login_persists_identity(self, store, storage):
        """Login should set and persist the identity."""
        identity = await store.login("john@example.com", "pw")

        assert store.get_identity() == identity
        assert Identity.model_validate_json(storage.get(STORAGE_KEY)) == identity
        assert store.can_book is True
        assert store.can_create_ride is False

    @pytest.mark.asyncio
    async def test_login_with_empty_credentials(self, storage):
        """Empty credentials fail without calling the authenticator."""
        authenticator = AsyncMock()
        store = SessionStore(authenticator, storage, storage_key=STORAGE_KEY)

        with pytest.raises(InvalidCredentialsError):
            await store.login("", "")

        authenticator.authenticate.assert_not_awaited()
        assert store.get_identity() is None
        assert storage.get(STORAGE_KEY) is None

    @pytest.mark.asyncio
    async def test_failed_login_keeps_previous_identity(self, store, driver_profile):
        """A rejected login leaves the session unchanged."""
        identity = await store.register(driver_profile)
        with pytest.raises(InvalidCredentialsError):
            await store.login("dana@example.com", "wrong")
        assert store.get_identity() == identity

    @pytest.mark.asyncio
    async def test_slow_authenticator_times_out(self, storage):
        """Login should be bounded by the timeout."""

        async def slow_authenticate(email, password):
            await asyncio.sleep(1)

        authenticator = AsyncMock()
        authenticator.authenticate.side_effect = slow_authenticate
        store = SessionStore(authenticator, storage, storage_key=STORAGE_KEY, timeout=0.01)

        with pytest.raises(RequestTimeoutError):
            await store.login("john@example.com", "pw")
        assert store.get_identity() is None

    @pytest.mark.asyncio
    async def test_register_driver(self, store, driver_profile):
        """Registering as a driver grants the publish capability."""
        identity = await store.register(driver_profile)

        assert identity.role == UserRole.DRIVER
        assert store.can_book is True
        assert store.can_create_ride is True

    @pytest.mark.asyncio
    async def test_register_reports_missing_fields(self, store):
        """All missing fields are reported in one error."""
        profile = RegistrationProfile(email="dana@example.com")
        with pytest.raises(RegistrationValidationError) as exc_info:
            await store.register(profile)
        assert exc_info.value.missing_fields == ["display_name", "password", "role"]
        assert store.get_identity() is None

    @pytest.mark.asyncio
    async def test_register_rejects_invalid_email(self, store, driver_profile):
        """A malformed email is reported as an invalid field."""
        profile = driver_profile.model_copy(update={"email": "dana@"})
        with pytest.raises(RegistrationValidationError) as exc_info:
            await store.register(profile)
        assert exc_info.value.missing_fields == ["email"]

    @pytest.mark.asyncio
    async def test_register_rejects_admin_role(self, store, driver_profile):
        """Admin accounts cannot be self-registered."""
        profile = driver_profile.model_copy(update={"role": UserRole.ADMIN})
        with pytest.raises(RegistrationValidationError) as exc_info:
            await store.register(profile)
        assert exc_info.value.missing_fields == ["role"]

    @pytest.mark.asyncio
    async def test_logout_clears_slot(self, store, storage):
        """Logout clears the identity and the persisted record."""
        await store.login("john@example.com", "pw")
        store.logout()

        assert store.get_identity() is None
        assert storage.get(STORAGE_KEY) is None
        assert store.can_book is False

    def test_logout_is_idempotent(self, store):
        """Logging out an anonymous session is a no-op."""
        store.logout()
        store.logout()
        assert store.get_identity() is None

    def test_restores_persisted_identity(self, authenticator, passenger):
        """A new store over the same slot picks up the identity."""
        storage = InMemoryKeyValueStore({STORAGE_KEY: passenger.model_dump_json()})
        store = SessionStore(authenticator, storage, storage_key=STORAGE_KEY)
        assert store.get_identity() == passenger
        assert store.can_book is True

    def test_discards_unreadable_record(self, authenticator):
        """A corrupt record is deleted and the session starts anonymous."""
        storage = InMemoryKeyValueStore({STORAGE_KEY: "{not json"})
        store = SessionStore(authenticator, storage, storage_key=STORAGE_KEY)
        assert store.get_identity() is None
        assert storage.get(STORAGE_KEY) is None

    @pytest.mark.asyncio
    async def test_state_snapshot(self, store):
        """state() reports identity and capabilities together."""
        await store.login("john@example.com", "pw")
        state = store.state()
        assert state.session_id == "s1"
        assert state.identity.id == "user-123"
        assert state.capabilities.can_book is True
        assert state.capabilities.can_create_ride is False

    @pytest.mark.asyncio
    async def test_identity_kept_until_logout(self, storage, passenger):
        """get_identity returns the authenticator's identity until logout."""
        authenticator = AsyncMock()
        authenticator.authenticate.return_value = passenger
        store = SessionStore(authenticator, storage, storage_key=STORAGE_KEY)

        assert await store.login("a@b.com", "pw") == passenger
        authenticator.authenticate.assert_awaited_once_with("a@b.com", "pw")
        assert store.get_identity() == passenger
        assert store.get_identity() == passenger

        store.logout()
        assert store.get_identity() is None
