# tests/conftest.py

from typing import Callable, Iterator, List, Optional

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from gp_relay.config import UPSTREAM_URL, RelaySettings
from gp_relay.main import create_app
from gp_relay.upstream.client import UpstreamFetcher, get_fetcher

StarlinkPayload = b'[{"OBJECT_NAME":"STARLINK-1007","NORAD_CAT_ID":44713,"EPOCH":"2024-01-01T00:00:00"}]'


class StubFetcher:
    """Stands in for the upstream fetcher and records how often it was asked."""

    def __init__(self, payload: bytes = b"", error: Optional[Exception] = None) -> None:
        self.payload = payload
        self.error = error
        self.calls = 0

    def fetch(self) -> bytes:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.payload


def mock_fetcher(handler: Callable[[httpx.Request], httpx.Response]) -> UpstreamFetcher:
    client = httpx.Client(transport=httpx.MockTransport(handler), follow_redirects=True)
    return UpstreamFetcher(UPSTREAM_URL, client=client)


def build_app(cors: bool) -> FastAPI:
    return create_app(RelaySettings(cors=cors))


@pytest.fixture
def upstream_client() -> Iterator[Callable[..., TestClient]]:
    """
    Factory: TestClient whose relay talks to a mock upstream served by `handler`.

    Clients are entered as context managers so the app's own fetcher is opened
    and closed by the lifespan; the mock fetchers are closed on teardown.
    """
    opened: List[TestClient] = []
    fetchers: List[UpstreamFetcher] = []

    def _make(handler: Callable[[httpx.Request], httpx.Response], cors: bool = True) -> TestClient:
        fetcher = mock_fetcher(handler)
        fetchers.append(fetcher)

        app = build_app(cors)
        app.dependency_overrides[get_fetcher] = lambda: fetcher
        client = TestClient(app).__enter__()
        opened.append(client)
        return client

    yield _make

    for client in opened:
        client.__exit__(None, None, None)
    for fetcher in fetchers:
        fetcher.close()


@pytest.fixture
def stub_client() -> Iterator[Callable[..., TestClient]]:
    """
    Factory: TestClient whose fetcher dependency is replaced by a StubFetcher.
    """
    opened: List[TestClient] = []

    def _make(stub: StubFetcher, cors: bool = True) -> TestClient:
        app = build_app(cors)
        app.dependency_overrides[get_fetcher] = lambda: stub
        client = TestClient(app).__enter__()
        opened.append(client)
        return client

    yield _make

    for client in opened:
        client.__exit__(None, None, None)
