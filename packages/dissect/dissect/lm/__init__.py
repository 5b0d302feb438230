"""Deep Dissect LM sub-package — provider interface, adapters, integrity check."""

from dissect.lm.integrity import IntegrityReport, check_integrity, missing_fields
from dissect.lm.provider import BaseJSONProvider, parse_json_content

__all__ = [
    "BaseJSONProvider",
    "IntegrityReport",
    "check_integrity",
    "missing_fields",
    "parse_json_content",
]
