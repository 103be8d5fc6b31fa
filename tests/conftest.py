"""Test fixtures — throwaway SQLite database, in-memory storage and mocked HTTP."""

import os
from collections.abc import AsyncGenerator
from typing import Callable, Optional
from unittest.mock import AsyncMock

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Force SQLite test database *before* any app import
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test_echoday.db"

from echoday.config import Settings  # noqa: E402
from echoday.database import Base, engine  # noqa: E402
from echoday.main import app  # noqa: E402
from echoday.services.webhook_dispatcher import WebhookDispatcher  # noqa: E402
from echoday.services.webhook_service import WebhookService  # noqa: E402
from echoday.services.webhook_store import WebhookStore  # noqa: E402


class MemoryBackend:
    """KeyValueBackend kept in a dict; counts writes."""

    def __init__(self, data: Optional[dict[str, str]] = None):
        self.data = dict(data or {})
        self.writes = 0

    async def get(self, key):
        return self.data.get(key)

    async def set(self, key, value):
        self.data[key] = value
        self.writes += 1


class Recorder:
    """httpx.MockTransport handler that records requests and replays canned outcomes.

    Each outcome is either a status code or an exception class raised for that
    attempt. The last outcome repeats once the list is used up.
    """

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes) or [200]
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        outcome = self.outcomes[min(len(self.requests), len(self.outcomes)) - 1]
        if isinstance(outcome, type) and issubclass(outcome, Exception):
            raise outcome("simulated failure", request=request)
        return httpx.Response(outcome, json={"ok": 200 <= outcome < 300})

    @property
    def calls(self) -> int:
        return len(self.requests)


@pytest_asyncio.fixture(autouse=True)
async def _setup_db():
    """Create all tables before each test, drop after."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def backend() -> MemoryBackend:
    return MemoryBackend()


@pytest.fixture
def store(backend) -> WebhookStore:
    return WebhookStore(backend)


@pytest.fixture
def sleep() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def make_dispatcher(sleep) -> Callable[..., tuple[WebhookDispatcher, Recorder]]:
    def _make(*outcomes, **kwargs):
        recorder = Recorder(*outcomes)
        return WebhookDispatcher(transport=httpx.MockTransport(recorder), sleep=sleep, **kwargs), recorder

    return _make


@pytest.fixture
def make_service(store, make_dispatcher) -> Callable[..., tuple[WebhookService, Recorder]]:
    def _make(*outcomes):
        dispatcher, recorder = make_dispatcher(*outcomes)
        return WebhookService(store, dispatcher, Settings()), recorder

    return _make


@pytest.fixture
def api_service(make_service):
    return make_service(200)


@pytest_asyncio.fixture
async def client(api_service) -> AsyncGenerator[AsyncClient, None]:
    from echoday.api.webhooks import get_webhook_service

    service, _ = api_service
    app.dependency_overrides[get_webhook_service] = lambda: service
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
