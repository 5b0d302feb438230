"""Shared test fixtures for Deep Dissect."""

from __future__ import annotations

import copy
from typing import Any

import pytest

from dissect.core.errors import ProxyError
from dissect.credentials import StaticCredential
from dissect.history import InteractionLog
from dissect.lm.provider import BaseJSONProvider
from dissect.orchestration import RequestOrchestrator
from dissect.storage import MemoryStorage
from dissect.tools.config import ToolConfig


# ── Providers ──────────────────────────────────────────────────────


class StubJSONProvider(BaseJSONProvider):
    """Provider returning a fixed JSON value and recording every call."""

    def __init__(self, name: str = "stub", response: Any = None) -> None:
        self._name = name
        self._response = {"ok": True} if response is None else response
        self.calls: list[dict[str, Any]] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def generate_json(
        self,
        system_prompt: str,
        user_prompt: str,
        *,
        schema: dict[str, Any] | None = None,
    ) -> Any:
        self.calls.append(
            {"system_prompt": system_prompt, "user_prompt": user_prompt, "schema": schema}
        )
        return copy.deepcopy(self._response)


class FailingJSONProvider(BaseJSONProvider):
    """Provider that always raises the given exception."""

    def __init__(self, exc: Exception | None = None, name: str = "failing") -> None:
        self._exc = exc or ProxyError(502, "Proxy 502 Bad Gateway")
        self._name = name
        self.call_count = 0

    @property
    def name(self) -> str:
        return self._name

    def generate_json(
        self,
        system_prompt: str,
        user_prompt: str,
        *,
        schema: dict[str, Any] | None = None,
    ) -> Any:
        self.call_count += 1
        raise self._exc


class PrimaryFactorySpy:
    """Primary factory that hands out one provider and remembers the keys it saw."""

    def __init__(self, provider: BaseJSONProvider) -> None:
        self.provider = provider
        self.keys: list[str] = []

    def __call__(self, api_key: str) -> BaseJSONProvider:
        self.keys.append(api_key)
        return self.provider


# ── Fixtures ───────────────────────────────────────────────────────


@pytest.fixture()
def storage() -> MemoryStorage:
    """Unlimited in-memory storage."""
    return MemoryStorage()


@pytest.fixture()
def history(storage: MemoryStorage) -> InteractionLog:
    """Interaction log on in-memory storage."""
    return InteractionLog(storage)


@pytest.fixture()
def ab_tool() -> ToolConfig[str, dict[str, Any]]:
    """Minimal tool expecting keys ``a`` and ``b``; ``b`` defaults to 0."""
    return ToolConfig(
        id="AB_TOOL",
        system_prompt="You return a and b.",
        build_user_prompt=lambda text: f"input: {text}",
        expected_shape={"a": 1, "b": 2},
        output_schema={
            "type": "OBJECT",
            "properties": {"a": {"type": "STRING"}, "b": {"type": "NUMBER"}},
        },
        normalize=lambda raw: {
            "a": raw.get("a", "") if isinstance(raw, dict) else "",
            "b": raw.get("b", 0) if isinstance(raw, dict) else 0,
        },
    )


def make_orchestrator(
    *,
    primary: BaseJSONProvider | None = None,
    fallback: BaseJSONProvider | None = None,
    api_key: str | None = None,
    history: InteractionLog | None = None,
) -> tuple[RequestOrchestrator, PrimaryFactorySpy]:
    """Build an orchestrator from stubs; returns it with the primary factory spy."""
    spy = PrimaryFactorySpy(primary or StubJSONProvider("primary"))
    orchestrator = RequestOrchestrator(
        credentials=StaticCredential(api_key),
        primary_factory=spy,
        fallback=fallback or StubJSONProvider("fallback"),
        history=history,
    )
    return orchestrator, spy
