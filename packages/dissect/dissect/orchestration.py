"""Request orchestrator — runs a tool against the primary/fallback providers."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from dissect.core.errors import ParseError
from dissect.credentials import CredentialSource
from dissect.history import InteractionLog
from dissect.lm.integrity import check_integrity
from dissect.lm.provider import BaseJSONProvider
from dissect.tools.config import ToolConfig

logger = logging.getLogger(__name__)

TInput = TypeVar("TInput")
TOutput = TypeVar("TOutput")

PrimaryFactory = Callable[[str], BaseJSONProvider]


class RequestOrchestrator:
    """Turns a tool config plus user input into a normalized, logged result.

    The primary provider is tried only when a primary credential is
    configured. On any primary failure, or when it is skipped, the fallback
    provider is called once; its failure is the only error that reaches
    the caller. Successful results are integrity-checked, normalized and
    appended to the interaction log. Log failures never affect the
    returned value.
    """

    def __init__(
        self,
        credentials: CredentialSource,
        primary_factory: PrimaryFactory,
        fallback: BaseJSONProvider,
        history: InteractionLog | None = None,
    ) -> None:
        self._credentials = credentials
        self._primary_factory = primary_factory
        self._fallback = fallback
        self._history = history

    @property
    def history(self) -> InteractionLog | None:
        return self._history

    def run(self, tool: ToolConfig[TInput, TOutput], input_data: TInput) -> TOutput:
        """Execute one tool request.

        Raises:
            Exception: Whatever the fallback provider raised, when the primary
                provider was skipped or failed and the fallback failed too.
        """
        system_prompt = tool.system_prompt
        user_prompt = tool.build_user_prompt(input_data)

        candidate = self._try_primary(tool, system_prompt, user_prompt)
        if candidate is None:
            logger.debug("[%s] Using fallback provider '%s'", tool.id, self._fallback.name)
            try:
                candidate = self._fallback.generate_json(
                    system_prompt, user_prompt, schema=tool.output_schema
                )
            except Exception as exc:
                logger.error(
                    "[%s] Fallback provider '%s' failed: %s", tool.id, self._fallback.name, exc
                )
                raise
            if candidate is None:
                raise ParseError(f"{self._fallback.name} returned a null result")

        check_integrity(tool.id, tool.required_fields, candidate)
        result = tool.apply_normalizer(candidate)
        self._record(tool, input_data, result)
        return result

    def _try_primary(
        self, tool: ToolConfig[Any, Any], system_prompt: str, user_prompt: str
    ) -> Any | None:
        api_key = self._credentials.get_primary_key()
        if not api_key:
            return None

        try:
            provider = self._primary_factory(api_key)
            return provider.generate_json(
                system_prompt, user_prompt, schema=tool.output_schema
            )
        except Exception as exc:
            logger.warning(
                "[%s] Primary provider failed: %s. Switching to fallback.", tool.id, exc
            )
            return None

    def _record(self, tool: ToolConfig[Any, Any], input_data: Any, result: Any) -> None:
        if self._history is None:
            return
        try:
            self._history.append(tool.id, input_data, result)
        except Exception:
            logger.exception("[%s] Failed to record interaction", tool.id)
