"""Client settings — local configuration persistence."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

_DEFAULT_DIR = os.path.expanduser("~/.dissect")
_SETTINGS_FILE = "settings.json"
_GEMINI_KEY_ENV_VARS = ("GEMINI_API_KEY", "VITE_GEMINI_API_KEY", "API_KEY")


class DissectSettings(BaseModel):
    """User-configurable client settings, persisted to local filesystem."""

    # Chat proxy routing (empty base URL = relative, behind a reverse proxy)
    proxy_base_url: str = "http://localhost:3001"
    proxy_path: str = "/api/deepseek"
    request_timeout: int = Field(default=120, gt=0)

    # Gemini fallback
    gemini_api_key: str | None = None
    gemini_model: str = "gemini-2.5-flash"
    gemini_temperature: float = Field(default=0.8, ge=0.0, le=2.0)

    # Durable storage
    storage_dir: str = Field(
        default_factory=lambda: os.path.expanduser("~/.dissect/storage")
    )
    history_capacity: int = Field(default=50, ge=2)

    def resolve_gemini_key(self) -> str | None:
        """Return the Gemini key from settings, else from the environment."""
        if self.gemini_api_key and self.gemini_api_key.strip():
            return self.gemini_api_key.strip()
        for var in _GEMINI_KEY_ENV_VARS:
            value = os.environ.get(var, "").strip()
            if value:
                return value
        return None

    def mask_keys(self) -> dict:
        """Dump the settings with the Gemini key shortened for display."""
        data = self.model_dump()
        val = data.get("gemini_api_key")
        if val:
            data["gemini_api_key"] = val[:8] + "..." + val[-4:] if len(val) > 12 else "****"
        return data


class SettingsManager:
    """Reads and writes ``settings.json`` in the Deep Dissect config directory.

    The directory defaults to ``$DISSECT_CONFIG_DIR`` or ``~/.dissect``.
    Updates are validated as a whole, so an out-of-range value raises
    ``pydantic.ValidationError`` and leaves the file untouched.
    """

    def __init__(self, config_dir: str | None = None) -> None:
        root = config_dir or os.environ.get("DISSECT_CONFIG_DIR") or _DEFAULT_DIR
        self._path = Path(root) / _SETTINGS_FILE

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> DissectSettings:
        """Read settings; a missing or unreadable file yields defaults."""
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return DissectSettings()
        except OSError as exc:
            logger.warning("Cannot read %s: %s", self._path, exc)
            return DissectSettings()

        try:
            return DissectSettings.model_validate_json(raw)
        except ValidationError as exc:
            logger.warning("Ignoring invalid settings in %s: %s", self._path, exc)
            return DissectSettings()

    def save(self, settings: DissectSettings) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(settings.model_dump_json(indent=2) + "\n", encoding="utf-8")

    def update(self, updates: dict) -> DissectSettings:
        """Merge non-None ``updates`` into the stored settings and persist them."""
        merged = self.load().model_dump()
        merged.update({k: v for k, v in updates.items() if v is not None})
        settings = DissectSettings.model_validate(merged)
        self.save(settings)
        return settings
