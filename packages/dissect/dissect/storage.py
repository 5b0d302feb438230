"""Durable key/value storage for settings entries and the interaction log."""

from __future__ import annotations

import contextlib
import errno
import logging
import os
import re
from abc import ABC, abstractmethod
from pathlib import Path

from dissect.core.errors import QuotaExceededError, StorageError

logger = logging.getLogger(__name__)

_DEFAULT_DIR = os.path.expanduser("~/.dissect/storage")
_QUOTA_ERRNOS = {errno.ENOSPC, getattr(errno, "EDQUOT", errno.ENOSPC), errno.EFBIG}
_SAFE_KEY = re.compile(r"[^A-Za-z0-9_.-]")


class KeyValueStorage(ABC):
    """A string-to-string store that survives process restarts."""

    @abstractmethod
    def get_item(self, key: str) -> str | None:
        """Return the stored value, or None if the key is absent."""

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``.

        Raises:
            QuotaExceededError: If the write would exceed the available space.
            StorageError: On any other write failure.
        """

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Delete ``key``. Missing keys are ignored."""


class MemoryStorage(KeyValueStorage):
    """In-process storage with an optional total size quota (in bytes)."""

    def __init__(self, quota_bytes: int | None = None) -> None:
        self._items: dict[str, str] = {}
        self._quota_bytes = quota_bytes

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        if self._quota_bytes is not None:
            used = sum(len(v.encode()) for k, v in self._items.items() if k != key)
            if used + len(value.encode()) > self._quota_bytes:
                raise QuotaExceededError(
                    f"Storage quota of {self._quota_bytes} bytes exceeded writing '{key}'"
                )
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def __len__(self) -> int:
        return len(self._items)


class FileStorage(KeyValueStorage):
    """Stores each key as a UTF-8 file in a base directory.

    ``quota_bytes`` caps the size of a single entry, mirroring the
    per-origin limits of browser storage.
    """

    def __init__(self, base_dir: str | None = None, quota_bytes: int | None = None) -> None:
        self._base_dir = Path(base_dir or _DEFAULT_DIR)
        self._quota_bytes = quota_bytes

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def _path_for(self, key: str) -> Path:
        return self._base_dir / f"{_SAFE_KEY.sub('_', key)}.json"

    def get_item(self, key: str) -> str | None:
        path = self._path_for(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Failed to read storage entry %s: %s", path, exc)
            return None

    def set_item(self, key: str, value: str) -> None:
        data = value.encode("utf-8")
        if self._quota_bytes is not None and len(data) > self._quota_bytes:
            raise QuotaExceededError(
                f"Entry '{key}' is {len(data)} bytes, quota is {self._quota_bytes}"
            )

        path = self._path_for(key)
        tmp = path.with_suffix(".tmp")
        try:
            self._base_dir.mkdir(parents=True, exist_ok=True)
            tmp.write_bytes(data)
            os.replace(tmp, path)
        except OSError as exc:
            with contextlib.suppress(OSError):
                tmp.unlink()
            if exc.errno in _QUOTA_ERRNOS:
                raise QuotaExceededError(f"No space left writing '{key}': {exc}") from exc
            raise StorageError(f"Failed to write '{key}' to {path}: {exc}") from exc

    def remove_item(self, key: str) -> None:
        try:
            self._path_for(key).unlink()
        except FileNotFoundError:
            pass
        except OSError as exc:
            raise StorageError(f"Failed to remove '{key}': {exc}") from exc
