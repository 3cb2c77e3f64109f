import pytest
import pytest_asyncio
import httpx
from fastapi import FastAPI
from typing import List

from store_client.client import StoreUploadClient
from tests.fakes import STORE_ENDPOINT, RecordingObserver, create_fake_store


@pytest.fixture
def observer() -> RecordingObserver:
    return RecordingObserver()


@pytest.fixture
def fake_store() -> FastAPI:
    return create_fake_store()


@pytest_asyncio.fixture
async def store_client(fake_store: FastAPI, observer: RecordingObserver):
    """Upload client wired to the fake store through an ASGI transport."""
    http_client = httpx.AsyncClient(transport=httpx.ASGITransport(app=fake_store))
    client = StoreUploadClient(STORE_ENDPOINT, http_client=http_client, observer=observer)
    yield client
    await http_client.aclose()


@pytest_asyncio.fixture
async def mock_store_client(observer: RecordingObserver):
    """Factory for upload clients whose transport answers every request with a handler."""
    http_clients: List[httpx.AsyncClient] = []

    def _make(handler) -> StoreUploadClient:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        http_clients.append(http_client)
        return StoreUploadClient(STORE_ENDPOINT, http_client=http_client, observer=observer)

    yield _make
    for http_client in http_clients:
        await http_client.aclose()
