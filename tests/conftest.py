"""
Shared fixtures: Gemini key control and mock HTTP transports.
"""
import json
from typing import Any, Callable, List, Optional

import httpx
import pytest

from hopeful_futures import config


@pytest.fixture(autouse=True)
def no_gemini_key(monkeypatch):
    """Every test starts without a Gemini key; tests that need one set it."""
    monkeypatch.setattr(config, "GEMINI_API_KEY", "")


@pytest.fixture
def gemini_key(monkeypatch):
    monkeypatch.setattr(config, "GEMINI_API_KEY", "test-key")
    return "test-key"


def gemini_body(text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


@pytest.fixture
def gemini_client() -> Callable[..., httpx.AsyncClient]:
    """Build an AsyncClient whose transport answers like Gemini.

    Pass `payload` (JSON-serialised into the candidate text), raw `text`,
    a full `body`, a `status`, or `error` to raise from the transport.
    Requests are recorded on `client.calls`.
    """

    def factory(
        payload: Any = None,
        text: Optional[str] = None,
        body: Optional[dict] = None,
        status: int = 200,
        error: Optional[Exception] = None,
    ) -> httpx.AsyncClient:
        calls: List[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            if error is not None:
                raise error
            if body is not None:
                return httpx.Response(status, json=body)
            content = text if text is not None else json.dumps(payload)
            return httpx.Response(status, json=gemini_body(content))

        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        client.calls = calls
        return client

    return factory
