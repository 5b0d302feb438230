"""DeepSeek proxy provider — routes chat requests through the local CORS proxy."""

from __future__ import annotations

import json
import logging
import urllib.error
import urllib.request
from typing import Any

from dissect.core.errors import ParseError, ProviderError, ProxyError
from dissect.lm.provider import BaseJSONProvider, parse_json_content

logger = logging.getLogger(__name__)

_STATUS_HINTS = {
    502: "Proxy 502 Bad Gateway. The proxy server might be down.",
    404: "Proxy 404 Not Found. Ensure the proxy server is running and routed.",
}


class DeepSeekProxyProvider(BaseJSONProvider):
    """Sends the caller's DeepSeek key and prompts to the chat proxy.

    The proxy owns model choice, temperature and the JSON response-format
    constraint; this adapter only POSTs ``{apiKey, systemPrompt, userPrompt}``
    and extracts ``choices[0].message.content`` from the upstream body.

    Transport is plain ``urllib.request``.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = "http://localhost:3001",
        path: str = "/api/deepseek",
        timeout: int = 120,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._path = path
        self._timeout = timeout

    @property
    def name(self) -> str:
        return "deepseek-proxy"

    @property
    def url(self) -> str:
        return f"{self._base_url}{self._path}"

    def generate_json(
        self,
        system_prompt: str,
        user_prompt: str,
        *,
        schema: dict[str, Any] | None = None,
    ) -> Any:
        logger.debug("DeepSeek request via proxy %s", self.url)
        data = self._post({
            "apiKey": self._api_key,
            "systemPrompt": system_prompt,
            "userPrompt": user_prompt,
        })

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            content = None
        if not isinstance(content, str):
            raise ParseError("Empty response from DeepSeek")
        return parse_json_content(content, "DeepSeek")

    def _post(self, payload: dict[str, Any]) -> Any:
        """POST JSON to the proxy endpoint and decode the JSON reply."""
        req = urllib.request.Request(
            self.url,
            data=json.dumps(payload).encode(),
            headers={"Content-Type": "application/json"},
            method="POST",
        )

        try:
            with urllib.request.urlopen(req, timeout=self._timeout) as resp:
                raw = resp.read()
        except urllib.error.HTTPError as e:
            body = e.read().decode(errors="replace")
            logger.error("Proxy error [%s]: %s", e.code, body)
            message = _STATUS_HINTS.get(e.code, f"Proxy Error: {e.code} {e.reason}")
            raise ProxyError(e.code, message, body) from e
        except urllib.error.URLError as e:
            raise ProviderError(
                f"Failed to connect to chat proxy at {self.url}: {e}"
            ) from e

        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            raise ParseError(f"Chat proxy returned a non-JSON body: {e}") from e
