"""Gemini provider — structured JSON generation with a strict response schema."""

from __future__ import annotations

import logging
from typing import Any

from dissect.core.errors import ConfigError, ProviderError
from dissect.lm.provider import BaseJSONProvider, parse_json_content

logger = logging.getLogger(__name__)


class GeminiProvider(BaseJSONProvider):
    """LM provider backed by the Google Gemini API.

    Uses ``response_mime_type="application/json"`` plus the tool's
    ``response_schema`` for constrained decoding. The API key is resolved
    when a request is made, so a missing key surfaces as ``ConfigError``
    on the call that needs it rather than at construction.

    Requires the ``google-genai`` package: ``pip install google-genai``.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str = "gemini-2.5-flash",
        temperature: float = 0.8,
    ) -> None:
        try:
            from google import genai  # noqa: F401
        except ImportError as e:
            raise ImportError(
                "The 'google-genai' package is required for GeminiProvider. "
                "Install it with: pip install google-genai"
            ) from e

        self._api_key = api_key
        self._model = model
        self._temperature = temperature
        self._client: Any = None

    @property
    def name(self) -> str:
        return self._model

    def _get_client(self) -> Any:
        if self._client is None:
            if not self._api_key:
                raise ConfigError(
                    "Gemini API key not found. Set GEMINI_API_KEY "
                    "(or VITE_GEMINI_API_KEY / API_KEY) or configure gemini_api_key."
                )
            from google import genai

            self._client = genai.Client(api_key=self._api_key)
        return self._client

    def generate_json(
        self,
        system_prompt: str,
        user_prompt: str,
        *,
        schema: dict[str, Any] | None = None,
    ) -> Any:
        from google.genai import types

        client = self._get_client()
        logger.debug("Gemini request (model=%s)", self._model)

        config = types.GenerateContentConfig(
            system_instruction=system_prompt,
            response_mime_type="application/json",
            response_schema=schema,
            temperature=self._temperature,
        )

        try:
            response = client.models.generate_content(
                model=self._model,
                contents=[types.Content(role="user", parts=[types.Part(text=user_prompt)])],
                config=config,
            )
        except Exception as exc:
            logger.error("Gemini call failed: %s", exc)
            raise ProviderError(f"Gemini request failed: {exc}") from exc

        return parse_json_content(response.text, "Gemini")
