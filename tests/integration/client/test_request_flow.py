"""End-to-end request flow: orchestrator → DeepSeek proxy → mocked upstream."""

from __future__ import annotations

import json
import socket
import time
from collections.abc import Iterator
from pathlib import Path
from threading import Thread
from typing import Any
from unittest.mock import MagicMock

import pytest
import uvicorn

from dissect.core.errors import ProxyError
from dissect.credentials import StoredCredential
from dissect.factory import create_orchestrator
from dissect.history import InteractionLog
from dissect.settings import DissectSettings
from dissect.storage import FileStorage
from dissect.suite import ToolSuite
from dissect.tools.results import JuryResult
from dissectproxy.server import create_app
from dissectproxy.settings import ProxySettings
from tests.conftest import FailingJSONProvider, StubJSONProvider

VERDICT = {
    "councilName": "午夜议会",
    "chaosMeter": 66,
    "jurors": [{"name": "理性脑", "vote": "AGAINST"}],
    "finalDecree": "驳回",
}


def _free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


class UpstreamStub:
    """Stands in for the DeepSeek SDK client behind the proxy."""

    def __init__(self, content: Any) -> None:
        self.keys: list[str] = []
        self.client = MagicMock()
        body = {"choices": [{"message": {"role": "assistant", "content": json.dumps(content)}}]}
        self.client.chat.completions.with_raw_response.create.return_value = MagicMock(
            content=json.dumps(body).encode()
        )

    def __call__(self, api_key: str) -> Any:
        self.keys.append(api_key)
        return self.client


@pytest.fixture()
def upstream() -> UpstreamStub:
    return UpstreamStub(VERDICT)


@pytest.fixture()
def proxy_url(upstream: UpstreamStub) -> Iterator[str]:
    """Run the proxy app on a real socket in a background thread."""
    port = _free_port()
    app = create_app(settings=ProxySettings(port=port), client_factory=upstream)
    server = uvicorn.Server(uvicorn.Config(app, host="127.0.0.1", port=port, log_level="warning"))
    thread = Thread(target=server.run, daemon=True)
    thread.start()
    deadline = time.monotonic() + 10
    while not server.started and time.monotonic() < deadline:
        time.sleep(0.02)
    yield f"http://127.0.0.1:{port}"
    server.should_exit = True
    thread.join(timeout=5)


@pytest.mark.integration
class TestRequestFlow:
    def test_primary_path_through_proxy(
        self, tmp_path: Path, proxy_url: str, upstream: UpstreamStub
    ) -> None:
        settings = DissectSettings(proxy_base_url=proxy_url, storage_dir=str(tmp_path))
        storage = FileStorage(settings.storage_dir)
        StoredCredential(storage).set_primary_key("sk-live")
        fallback = StubJSONProvider("fallback", {})

        suite = ToolSuite(create_orchestrator(settings, storage=storage, fallback=fallback))
        result = suite.run_personality_jury("要不要养猫")

        assert isinstance(result, JuryResult)
        assert result.council_name == "午夜议会"
        assert result.final_decree == "驳回"
        assert upstream.keys == ["sk-live"]
        assert fallback.call_count == 0

        # A fresh log over the same directory sees the persisted record.
        records = InteractionLog(FileStorage(str(tmp_path))).list()
        assert len(records) == 1
        assert records[0].tool_id == "JURY"
        assert records[0].input_summary == "要不要养猫"
        assert records[0].result["finalDecree"] == "驳回"

    def test_proxy_down_falls_back(self, tmp_path: Path) -> None:
        settings = DissectSettings(
            proxy_base_url=f"http://127.0.0.1:{_free_port()}",
            request_timeout=2,
            storage_dir=str(tmp_path),
        )
        storage = FileStorage(settings.storage_dir)
        StoredCredential(storage).set_primary_key("sk-live")
        fallback = StubJSONProvider("fallback", {"verdict": "guilty"})

        suite = ToolSuite(create_orchestrator(settings, storage=storage, fallback=fallback))
        result = suite.run_personality_jury("要不要养猫")

        assert result == JuryResult()
        assert fallback.call_count == 1
        assert len(InteractionLog(storage).list()) == 1

    def test_total_failure_leaves_no_record(self, tmp_path: Path) -> None:
        settings = DissectSettings(storage_dir=str(tmp_path))
        storage = FileStorage(settings.storage_dir)
        fallback = FailingJSONProvider(name="fallback")

        suite = ToolSuite(create_orchestrator(settings, storage=storage, fallback=fallback))
        with pytest.raises(ProxyError):
            suite.run_code_archaeology("goto fail;")

        assert InteractionLog(storage).list() == []
