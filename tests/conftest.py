from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

import sketchgen.client.transport as transport_mod
from sketchgen.common.config import Settings

_REAL_ASYNC_CLIENT = httpx.AsyncClient


def ok_body(text: str) -> dict[str, Any]:
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


class FakeGemini:
    """Records outgoing requests and answers them with `handler`."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.handler: Callable[[httpx.Request], httpx.Response] = (
            lambda request: httpx.Response(200, json=ok_body("ok"))
        )

    def reply(self, status_code: int = 200, json_data: Any = None, text: str | None = None) -> None:
        if text is not None:
            self.handler = lambda request: httpx.Response(status_code, text=text)
        else:
            self.handler = lambda request: httpx.Response(status_code, json=json_data)

    def fail(self, exc_type: type[httpx.RequestError] = httpx.ConnectError) -> None:
        def _raise(request: httpx.Request) -> httpx.Response:
            raise exc_type("connection refused", request=request)

        self.handler = _raise

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def last_body(self) -> dict[str, Any]:
        return json.loads(self.requests[-1].content)


@pytest.fixture()
def settings() -> Settings:
    return Settings(api_base_url="https://gemini.test/v1beta", model_id="gemini-test")


@pytest.fixture()
def gemini(monkeypatch: pytest.MonkeyPatch) -> FakeGemini:
    # Patch httpx.AsyncClient in the transport module to avoid network calls
    fake = FakeGemini()

    def _client(**kwargs: Any) -> httpx.AsyncClient:
        return _REAL_ASYNC_CLIENT(transport=httpx.MockTransport(fake), **kwargs)

    monkeypatch.setattr(transport_mod.httpx, "AsyncClient", _client)
    return fake
