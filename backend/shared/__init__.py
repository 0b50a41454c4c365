"""
Shared infrastructure for the Carpool backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- exceptions: Base exception classes
- storage: Key-value slots for persisted session state
- timeouts: Bounded waiting on external collaborators

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .exceptions import (
    CarpoolError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
    NetworkError,
    RequestTimeoutError,
)
from .storage import (
    IKeyValueStore,
    InMemoryKeyValueStore,
    JsonFileKeyValueStore,
    NamespacedKeyValueStore,
    create_key_value_store,
)
from .models import Identity, UserRole
from .timeouts import with_timeout

__all__ = [
    "Settings",
    "get_settings",
    "CarpoolError",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "ExternalServiceError",
    "NetworkError",
    "RequestTimeoutError",
    "IKeyValueStore",
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
    "NamespacedKeyValueStore",
    "create_key_value_store",
    "with_timeout",
    "Identity",
    "UserRole",
]
