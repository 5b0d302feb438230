"""Proxy settings — upstream endpoint and request constants."""

from __future__ import annotations

import os

from pydantic import BaseModel, Field

JSON_INSTRUCTION = "\n\nIMPORTANT: You must respond with valid JSON."


class ProxySettings(BaseModel):
    """Runtime configuration for the chat proxy."""

    host: str = "0.0.0.0"
    port: int = Field(default=3001, gt=0, lt=65536)
    upstream_base_url: str = "https://api.deepseek.com"
    model: str = "deepseek-chat"
    temperature: float = Field(default=1.0, ge=0.0, le=2.0)
    timeout: float = Field(default=120.0, gt=0)
    allow_origins: list[str] = Field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls) -> ProxySettings:
        """Build settings, letting environment variables override defaults."""
        overrides: dict[str, object] = {}
        if host := os.environ.get("DISSECT_PROXY_HOST"):
            overrides["host"] = host
        if port := os.environ.get("DISSECT_PROXY_PORT"):
            overrides["port"] = int(port)
        if base_url := os.environ.get("DEEPSEEK_BASE_URL"):
            overrides["upstream_base_url"] = base_url
        return cls.model_validate(overrides)
