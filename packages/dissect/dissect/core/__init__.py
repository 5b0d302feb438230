"""Deep Dissect core — identifiers and the error hierarchy."""

from dissect.core.errors import (
    ConfigError,
    DissectError,
    DuplicateToolError,
    ParseError,
    PersistenceError,
    ProviderError,
    ProxyError,
    QuotaExceededError,
    StorageError,
    ToolNotFoundError,
)
from dissect.core.identifiers import RecordId, generate_record_id, now_ms

__all__ = [
    "ConfigError",
    "DissectError",
    "DuplicateToolError",
    "ParseError",
    "PersistenceError",
    "ProviderError",
    "ProxyError",
    "QuotaExceededError",
    "RecordId",
    "StorageError",
    "ToolNotFoundError",
    "generate_record_id",
    "now_ms",
]
