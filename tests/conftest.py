import json
from typing import Callable, List

import httpx
import pytest

from hitbtc import Client, ClientConfig

TEST_BASE_URL = "https://api.test.hitbtc.local"


class RecordingTransport(httpx.MockTransport):
    """Mock transport that remembers every request it served."""

    def __init__(self, responder: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: List[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return responder(request)

        super().__init__(handler)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def _json_response(payload, status_code: int = 200) -> Callable[[httpx.Request], httpx.Response]:
    body = json.dumps(payload).encode("utf-8")

    def responder(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            status_code,
            content=body,
            headers={"Content-Type": "application/json"},
        )

    return responder


@pytest.fixture
def json_response():
    """Return a responder factory serving a fixed JSON payload."""
    return _json_response


@pytest.fixture
def make_client():
    """Build a public client backed by a recording mock transport."""

    def factory(responder) -> tuple[Client, RecordingTransport]:
        transport = RecordingTransport(responder)
        http_client = httpx.AsyncClient(transport=transport)
        client = Client(ClientConfig(base_url=TEST_BASE_URL), http_client=http_client)
        return client, transport

    return factory
