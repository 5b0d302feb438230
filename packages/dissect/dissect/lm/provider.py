"""LM provider — abstract interface for JSON-producing model backends."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import Any

from dissect.core.errors import ParseError


class BaseJSONProvider(ABC):
    """Abstract base class for JSON-producing language model providers.

    Given a system prompt and a user prompt, a provider returns the parsed
    JSON value produced by the model, or raises. Concrete adapters
    (DeepSeek via the chat proxy, Gemini) define only transport details.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name (e.g., 'deepseek-proxy', 'gemini-2.5-flash')."""

    @abstractmethod
    def generate_json(
        self,
        system_prompt: str,
        user_prompt: str,
        *,
        schema: dict[str, Any] | None = None,
    ) -> Any:
        """Generate a completion and return it parsed as JSON.

        Args:
            system_prompt: Persona and output contract for the model.
            user_prompt: The rendered user request.
            schema: Strict output schema, used by providers that support
                constrained decoding and ignored by the rest.

        Raises:
            DissectError: On any transport, configuration, or parse failure.
        """


def parse_json_content(content: str | None, source: str) -> Any:
    """Parse model output text as JSON, raising ParseError on failure."""
    if not content or not content.strip():
        raise ParseError(f"Empty response from {source}")
    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ParseError(f"{source} returned invalid JSON: {e}") from e
