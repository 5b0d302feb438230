"""Tool configuration — the static definition of one analysis tool."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

TInput = TypeVar("TInput")
TOutput = TypeVar("TOutput")


@dataclass(frozen=True)
class ToolConfig(Generic[TInput, TOutput]):
    """Prompts, expected shape, schema and normalizer for one tool.

    ``expected_shape`` is a template of top-level keys used only for
    drift detection; ``output_schema`` is the strict schema handed to
    providers that support constrained decoding. ``normalize``, when set,
    must be total: it returns a fully populated ``TOutput`` for any raw
    value, including ``{}``.
    """

    id: str
    system_prompt: str
    build_user_prompt: Callable[[TInput], str]
    expected_shape: Mapping[str, Any]
    output_schema: dict[str, Any]
    normalize: Callable[[Any], TOutput] | None = None
    title: str = ""
    description: str = ""

    @property
    def required_fields(self) -> tuple[str, ...]:
        """Top-level field names every result is expected to carry."""
        return tuple(self.expected_shape)

    def apply_normalizer(self, raw: Any) -> TOutput:
        """Normalize a raw result, or pass it through unchanged."""
        if self.normalize is None:
            return raw
        return self.normalize(raw)
