"""FastAPI server for the Deep Dissect chat proxy."""

from __future__ import annotations

import logging
from typing import Any, Callable

import openai
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from dissectproxy.api_schemas import ChatProxyRequest, ErrorResponse
from dissectproxy.settings import JSON_INSTRUCTION, ProxySettings

logger = logging.getLogger(__name__)

ClientFactory = Callable[[str], Any]


def _make_client_factory(settings: ProxySettings) -> ClientFactory:
    """Create a factory that builds an OpenAI-compatible DeepSeek client per key."""

    def factory(api_key: str) -> Any:
        return openai.OpenAI(
            api_key=api_key,
            base_url=settings.upstream_base_url,
            timeout=settings.timeout,
            max_retries=0,
        )

    return factory


def create_app(
    *,
    settings: ProxySettings | None = None,
    client_factory: ClientFactory | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Proxy settings (environment-derived defaults if None).
        client_factory: Factory api_key → OpenAI-compatible client. If None,
            builds ``openai.OpenAI`` clients pointed at the upstream URL.
    """
    settings = settings or ProxySettings.from_env()
    client_factory = client_factory or _make_client_factory(settings)

    app = FastAPI(title="Deep Dissect Proxy", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.settings = settings

    @app.post(
        "/api/deepseek",
        responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    )
    def relay_chat(request: ChatProxyRequest) -> Response:
        """Forward one chat completion to DeepSeek and return its raw body."""
        if not request.api_key:
            return JSONResponse(status_code=400, content={"error": "Missing API Key"})

        logger.info("Forwarding request to DeepSeek")
        try:
            client = client_factory(request.api_key)
            raw = client.chat.completions.with_raw_response.create(
                model=settings.model,
                messages=[
                    {"role": "system", "content": f"{request.system_prompt}{JSON_INSTRUCTION}"},
                    {"role": "user", "content": request.user_prompt},
                ],
                response_format={"type": "json_object"},
                temperature=settings.temperature,
            )
        except openai.APIStatusError as exc:
            body = exc.response.text
            logger.error("DeepSeek API error: %s - %s", exc.status_code, body)
            return Response(
                content=body,
                status_code=exc.status_code,
                media_type=exc.response.headers.get("content-type", "text/plain"),
            )
        except Exception as exc:
            logger.error("Proxy error: %s", exc)
            return JSONResponse(status_code=500, content={"error": "Internal Server Error"})

        return Response(content=raw.content, media_type="application/json")

    return app
