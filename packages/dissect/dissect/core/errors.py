"""Core error hierarchy for Deep Dissect."""

from __future__ import annotations


class DissectError(Exception):
    """Base exception for all Deep Dissect errors."""


class ConfigError(DissectError):
    """Raised when a provider has no usable credential or configuration."""


class ProviderError(DissectError):
    """Raised when a provider adapter cannot complete a request."""


class ProxyError(ProviderError):
    """Raised when the chat proxy answers with a non-success HTTP status."""

    def __init__(self, status: int, message: str, body: str = "") -> None:
        super().__init__(message)
        self.status = status
        self.body = body


class ParseError(ProviderError):
    """Raised when a provider response carries no parseable JSON content."""


class StorageError(DissectError):
    """Raised when durable storage cannot read or write an entry."""


class QuotaExceededError(StorageError):
    """Raised when a write would exceed the storage quota."""


class PersistenceError(DissectError):
    """An interaction log append failed even after pruning. Logged, never raised."""


class DuplicateToolError(DissectError):
    """Raised when a tool id is registered twice."""


class ToolNotFoundError(DissectError):
    """Raised when looking up a tool id that is not registered."""
