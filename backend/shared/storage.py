"""
Key-value storage for client-side session state.

The session store only needs get/set/delete by key, so anything that
satisfies IKeyValueStore can back it: process memory, a JSON file on disk,
or a namespaced view over another store (one namespace per HTTP session).
"""

import json
import logging
from pathlib import Path
from typing import Optional, Protocol, runtime_checkable

from .config import get_settings

logger = logging.getLogger(__name__)


@runtime_checkable
class IKeyValueStore(Protocol):
    """Minimal durable key-value slot interface."""

    def get(self, key: str) -> Optional[str]:
        """Return the stored value, or None if the key is absent."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store a value, replacing any previous one."""
        ...

    def delete(self, key: str) -> None:
        """Remove a key. Deleting a missing key is a no-op."""
        ...


class InMemoryKeyValueStore:
    """Process-lifetime store backed by a dict."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._data)


class JsonFileKeyValueStore:
    """
    Store persisted as a single JSON object on disk.

    The whole file is rewritten on every mutation, through a temporary file
    that then replaces it. A file that does not parse reads as empty. This
    is only meant for a handful of session records, not as a general database.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        raw = self._path.read_text(encoding="utf-8")
        if not raw.strip():
            return {}
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Ignoring unreadable session file %s", self._path)
            return {}

    def _dump(self, data: dict[str, str]) -> None:
        # Readers see either the old or the new file, never a partial one
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        tmp_path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        tmp_path.replace(self._path)

    def get(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._dump(data)

    def delete(self, key: str) -> None:
        data = self._load()
        if key in data:
            del data[key]
            self._dump(data)


class NamespacedKeyValueStore:
    """
    View over another store that prefixes every key.

    Lets many sessions share one backing store while each still
    addresses its identity slot by the same fixed key.
    """

    def __init__(self, backend: IKeyValueStore, namespace: str):
        self._backend = backend
        self._namespace = namespace

    @property
    def namespace(self) -> str:
        return self._namespace

    def _key(self, key: str) -> str:
        return f"{self._namespace}:{key}"

    def get(self, key: str) -> Optional[str]:
        return self._backend.get(self._key(key))

    def set(self, key: str, value: str) -> None:
        self._backend.set(self._key(key), value)

    def delete(self, key: str) -> None:
        self._backend.delete(self._key(key))


def create_key_value_store(path: Optional[str] = None) -> IKeyValueStore:
    """
    Build the backing store from configuration.

    Args:
        path: JSON file to persist to. Falls back to settings.session_store_path,
              then to an in-memory store.
    """
    path = path or get_settings().session_store_path
    if path:
        logger.info("Persisting sessions to %s", path)
        return JsonFileKeyValueStore(path)
    return InMemoryKeyValueStore()
