"""Primary-provider credential access."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from dissect.storage import KeyValueStorage

PRIMARY_KEY_ENTRY = "DEEPSEEK_API_KEY"


@runtime_checkable
class CredentialSource(Protocol):
    """Reads the currently configured DeepSeek key."""

    def get_primary_key(self) -> str | None: ...


class StoredCredential:
    """DeepSeek key kept as a single durable storage entry.

    Values are trimmed; an empty value means "unset" and removes the entry.
    """

    def __init__(self, storage: KeyValueStorage, key: str = PRIMARY_KEY_ENTRY) -> None:
        self._storage = storage
        self._key = key

    def get_primary_key(self) -> str | None:
        value = self._storage.get_item(self._key)
        if value is None:
            return None
        value = value.strip()
        return value or None

    def set_primary_key(self, value: str | None) -> None:
        value = (value or "").strip()
        if value:
            self._storage.set_item(self._key, value)
        else:
            self._storage.remove_item(self._key)

    def clear(self) -> None:
        self._storage.remove_item(self._key)


class StaticCredential:
    """A fixed credential, for tests and embedding."""

    def __init__(self, key: str | None = None) -> None:
        self._key = key.strip() if key else None

    def get_primary_key(self) -> str | None:
        return self._key or None
