"""Wiring — build the default orchestrator stack from settings."""

from __future__ import annotations

import logging

from dissect.credentials import CredentialSource, StoredCredential
from dissect.history import InteractionLog
from dissect.lm.provider import BaseJSONProvider
from dissect.lm.providers.deepseek_proxy import DeepSeekProxyProvider
from dissect.lm.providers.gemini import GeminiProvider
from dissect.orchestration import PrimaryFactory, RequestOrchestrator
from dissect.settings import DissectSettings
from dissect.storage import FileStorage, KeyValueStorage

logger = logging.getLogger(__name__)


def make_primary_factory(settings: DissectSettings) -> PrimaryFactory:
    """Create a factory that binds a caller's DeepSeek key to a proxy provider."""

    def factory(api_key: str) -> BaseJSONProvider:
        return DeepSeekProxyProvider(
            api_key=api_key,
            base_url=settings.proxy_base_url,
            path=settings.proxy_path,
            timeout=settings.request_timeout,
        )

    return factory


def create_orchestrator(
    settings: DissectSettings | None = None,
    *,
    storage: KeyValueStorage | None = None,
    credentials: CredentialSource | None = None,
    fallback: BaseJSONProvider | None = None,
) -> RequestOrchestrator:
    """Build a RequestOrchestrator with file-backed history and credentials.

    Args:
        settings: Client settings (defaults if None).
        storage: Durable storage for the credential and history entries.
            Defaults to ``FileStorage(settings.storage_dir)``.
        credentials: Primary credential source. Defaults to the stored
            DeepSeek key in ``storage``.
        fallback: Fallback provider. Defaults to Gemini with the resolved key.
    """
    settings = settings or DissectSettings()
    if storage is None:
        storage = FileStorage(settings.storage_dir)
    if credentials is None:
        credentials = StoredCredential(storage)

    if fallback is None:
        fallback = GeminiProvider(
            api_key=settings.resolve_gemini_key(),
            model=settings.gemini_model,
            temperature=settings.gemini_temperature,
        )

    logger.debug(
        "Orchestrator wired: proxy=%s%s fallback=%s",
        settings.proxy_base_url,
        settings.proxy_path,
        fallback.name,
    )
    return RequestOrchestrator(
        credentials=credentials,
        primary_factory=make_primary_factory(settings),
        fallback=fallback,
        history=InteractionLog(storage, capacity=settings.history_capacity),
    )
