"""Interaction log — bounded, newest-first history of successful requests."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, ValidationError
from pydantic_core import to_jsonable_python

from dissect.core.errors import PersistenceError, StorageError
from dissect.core.identifiers import generate_record_id, now_ms
from dissect.storage import KeyValueStorage

logger = logging.getLogger(__name__)

HISTORY_ENTRY = "DEEP_DISSECT_HISTORY"
DEFAULT_CAPACITY = 50
SUMMARY_LIMIT = 50
_SUMMARY_FIELDS = ("title", "concept", "question", "termA")


class RequestRecord(BaseModel):
    """One successful orchestrated request."""

    id: str = Field(description="Time-prefixed unique record id")
    created_at: int = Field(ge=0, description="Milliseconds since the epoch")
    tool_id: str = Field(description="Id of the tool that produced the result")
    input_summary: str = ""
    result: Any = Field(default=None, description="Normalized output, opaque to the log")


def _truncate(text: str, limit: int = SUMMARY_LIMIT) -> str:
    if len(text) <= limit:
        return text
    return text[: limit - 3] + "..."


def summarize_input(input_data: Any) -> str:
    """Build a short human-readable digest of a tool input."""
    if isinstance(input_data, str):
        return _truncate(input_data)

    data = to_jsonable_python(input_data, by_alias=True, fallback=str)
    if isinstance(data, Mapping):
        for name in _SUMMARY_FIELDS:
            value = data.get(name)
            if value:
                return _truncate(str(value))
    try:
        return json.dumps(data, ensure_ascii=False, separators=(",", ":"))[:SUMMARY_LIMIT]
    except (TypeError, ValueError):
        return str(data)[:SUMMARY_LIMIT]


class InteractionLog:
    """Capped ring buffer of ``RequestRecord`` kept in a single storage entry.

    The entry holds a JSON array, newest record first. Appends are
    read-modify-write without locking; overlapping writers follow
    last-writer-wins. The log is best-effort and never raises from
    ``append``.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        capacity: int = DEFAULT_CAPACITY,
        key: str = HISTORY_ENTRY,
    ) -> None:
        if capacity < 2:
            raise ValueError("capacity must be at least 2")
        self._storage = storage
        self._capacity = capacity
        self._key = key

    @property
    def capacity(self) -> int:
        return self._capacity

    def list(self) -> list[RequestRecord]:
        """Return all records, newest first. Corrupt data yields what survives."""
        raw = self._storage.get_item(self._key)
        if not raw:
            return []
        try:
            items = json.loads(raw)
        except json.JSONDecodeError as exc:
            logger.warning("Discarding unreadable history entry: %s", exc)
            return []
        if not isinstance(items, list):
            logger.warning("Discarding history entry of type %s", type(items).__name__)
            return []

        records: list[RequestRecord] = []
        for item in items:
            try:
                records.append(RequestRecord.model_validate(item))
            except ValidationError:
                logger.debug("Dropping corrupt history record: %r", item)
        return records

    def append(self, tool_id: str, input_data: Any, result: Any) -> RequestRecord | None:
        """Prepend a record for a successful request.

        On a storage failure (``StorageError`` or a raw ``OSError`` from a custom
        backend) the newest half of the existing log is kept and
        the write is retried once. Returns None if the retry fails too.
        """
        created_at = now_ms()
        record = RequestRecord(
            id=generate_record_id(created_at),
            created_at=created_at,
            tool_id=tool_id,
            input_summary=summarize_input(input_data),
            result=to_jsonable_python(result, by_alias=True, fallback=str),
        )

        existing = self.list()
        try:
            self._write([record, *existing][: self._capacity])
            return record
        except (StorageError, OSError) as exc:
            logger.warning(
                "History write failed (%s); pruning to %d records and retrying",
                exc,
                self._capacity // 2,
            )

        pruned = [record, *existing[: self._capacity // 2 - 1]]
        try:
            self._write(pruned)
            return record
        except (StorageError, OSError) as exc:
            err = PersistenceError(f"History append for '{tool_id}' failed after pruning: {exc}")
            logger.error("%s", err)
            return None

    def clear(self) -> None:
        """Delete the whole log."""
        self._storage.remove_item(self._key)

    def remove(self, record_id: str) -> list[RequestRecord]:
        """Remove one record by id and return the updated log."""
        updated = [r for r in self.list() if r.id != record_id]
        self._write(updated)
        return updated

    def _write(self, records: list[RequestRecord]) -> None:
        payload = json.dumps(
            [r.model_dump(mode="json") for r in records], ensure_ascii=False
        )
        self._storage.set_item(self._key, payload)
