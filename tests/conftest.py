"""Shared fixtures: a recording httpx.MockTransport and in-memory token storage."""
import asyncio
from typing import Callable

import httpx
import pytest

from texie.credentials import CredentialStore
from texie.token_store import MemoryTokenStorage

Handler = Callable[[httpx.Request], httpx.Response]


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it was asked to send.

    Each request yields to the event loop once before it is answered, so
    overlapping coroutines interleave the way they would on a real socket.
    """

    def __init__(self, handler: Handler) -> None:
        self.requests: list[httpx.Request] = []
        self._route = handler
        super().__init__(self._record)

    async def _record(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        await asyncio.sleep(0)
        return self._route(request)


@pytest.fixture
def make_http():
    def _make(handler: Handler) -> tuple[httpx.AsyncClient, RecordingTransport]:
        transport = RecordingTransport(handler)
        client = httpx.AsyncClient(transport=transport)
        return client, transport

    return _make


@pytest.fixture
def storage() -> MemoryTokenStorage:
    return MemoryTokenStorage()


@pytest.fixture
def store(storage) -> CredentialStore:
    return CredentialStore(storage)


@pytest.fixture
def configured_store(store) -> CredentialStore:
    store.set_credentials("app-id", "app-secret")
    return store
