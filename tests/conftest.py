"""
Shared test configuration and fixtures for Tracelane SDK tests.

HTTP traffic never leaves the process: every client is built around an
``httpx.MockTransport`` whose handler is supplied by the test.
"""

import json
import logging
from typing import Any, Callable, Dict, Generator, List, Optional

import httpx
import pytest

from tracelane import Tracelane

# Configure logging for tests
logging.basicConfig(level=logging.DEBUG)

TEST_HOST = "https://tracelane.test"
TEST_BASE_PATH = "/api/public"

Handler = Callable[[httpx.Request], httpx.Response]


class FakeServer:
    """Records every request and answers with a canned or computed response."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self._handler: Handler = lambda request: httpx.Response(200, json={})

    def respond_with(self, status_code: int = 200, json_body: Any = None, text: Optional[str] = None) -> None:
        def _handler(request: httpx.Request) -> httpx.Response:
            if text is not None:
                return httpx.Response(status_code, text=text)
            return httpx.Response(status_code, json=json_body if json_body is not None else {})

        self._handler = _handler

    def handle_with(self, handler: Handler) -> None:
        self._handler = handler

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    @property
    def last_path(self) -> str:
        path = self.last_request.url.path
        assert path.startswith(TEST_BASE_PATH)
        return path[len(TEST_BASE_PATH) :]

    @property
    def last_query(self) -> str:
        return self.last_request.url.query.decode()

    @property
    def last_json(self) -> Dict[str, Any]:
        return json.loads(self.last_request.content)  # type: ignore[no-any-return]


@pytest.fixture(autouse=True)  # type: ignore
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep TRACELANE_* variables of the developer's shell out of the tests."""
    for var in (
        "TRACELANE_HOST",
        "TRACELANE_PUBLIC_KEY",
        "TRACELANE_SECRET_KEY",
        "TRACELANE_HEADERS",
        "TRACELANE_TIMEOUT",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture  # type: ignore
def server() -> FakeServer:
    return FakeServer()


@pytest.fixture  # type: ignore
def client(server: FakeServer) -> Generator[Tracelane, None, None]:
    """A Tracelane client wired to the fake server."""
    http_client = httpx.Client(transport=httpx.MockTransport(server))
    tracelane = Tracelane(host=TEST_HOST, public_key="pk-test", secret_key="sk-test", http_client=http_client)
    yield tracelane
    tracelane.close()
    http_client.close()


@pytest.fixture  # type: ignore
def list_meta() -> Dict[str, int]:
    """Pagination envelope echoed back by list endpoints."""
    return {"page": 2, "limit": 5, "totalItems": 15, "totalPages": 3}
