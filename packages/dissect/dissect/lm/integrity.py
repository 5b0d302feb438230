"""Integrity check — shallow structural diff of a model result."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IntegrityReport:
    """Outcome of comparing a result's top-level keys with the declared fields."""

    tool_id: str
    missing: tuple[str, ...] = field(default_factory=tuple)

    @property
    def passed(self) -> bool:
        return not self.missing


def missing_fields(required: Iterable[str], candidate: Any) -> list[str]:
    """Return the required field names absent from ``candidate``'s top level.

    Non-mapping candidates have no fields, so every required name is missing.
    Nested structure and value types are not inspected.
    """
    present = candidate.keys() if isinstance(candidate, Mapping) else ()
    return [name for name in required if name not in present]


def check_integrity(tool_id: str, required: Iterable[str], candidate: Any) -> IntegrityReport:
    """Run the shallow check and log the outcome. Never raises."""
    report = IntegrityReport(tool_id=tool_id, missing=tuple(missing_fields(required, candidate)))
    if report.passed:
        logger.info("[%s] Integrity check passed", tool_id)
    else:
        logger.warning(
            "[%s] Integrity warning: missing keys %s", tool_id, list(report.missing)
        )
    return report
