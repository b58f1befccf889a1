# backend/portfolio_api/tests/conftest.py
"""
Fixtures y helpers para pruebas con FastAPI + pytest-asyncio.
La suite corre sin Mongo: fuerza modo mock y usa un store en memoria
cuando necesita ejercitar la ruta de persistencia.
"""
import os
import sys
import uuid
from contextlib import asynccontextmanager
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from asgi_lifespan import LifespanManager

# ---- sin store real; DB de test única por corrida (ANTES de importar main) ----
os.environ["STORE_ENABLED"] = "false"
os.environ.setdefault("MONGO_DB", f"portfolio_test_{uuid.uuid4().hex[:8]}")

# ---- asegurar imports absolutos 'portfolio_api.*' ----
ROOT_DIR = Path(__file__).resolve().parents[1]   # .../backend/portfolio_api
sys.path.insert(0, str(ROOT_DIR.parent))         # .../backend

from portfolio_api.main import app  # noqa
from portfolio_api.core.deps import current_persister  # noqa
from portfolio_api.services.message_service import MessagePersister  # noqa


class FakeStore:
    """Store en memoria: registra cada escritura y opcionalmente falla."""

    def __init__(self, error: BaseException | None = None) -> None:
        self.error = error
        self.writes: list[tuple[str, dict]] = []

    async def add(self, collection: str, fields: dict) -> str:
        self.writes.append((collection, dict(fields)))
        if self.error is not None:
            raise self.error
        return f"doc-{len(self.writes)}"


@pytest.fixture
def make_store():
    return FakeStore


@pytest.fixture
def fake_store(make_store):
    return make_store()


@pytest_asyncio.fixture
async def async_client():
    async with LifespanManager(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://testserver") as client:
            yield client


@asynccontextmanager
async def _client_with_store(store: FakeStore):
    app.dependency_overrides[current_persister] = lambda: MessagePersister(store)
    try:
        async with LifespanManager(app):
            transport = ASGITransport(app=app)
            async with AsyncClient(transport=transport, base_url="http://testserver") as client:
                yield client
    finally:
        app.dependency_overrides.pop(current_persister, None)


@pytest_asyncio.fixture
async def store_client(fake_store):
    async with _client_with_store(fake_store) as client:
        yield client


@pytest_asyncio.fixture
async def broken_store_client():
    async with _client_with_store(FakeStore(error=RuntimeError("store down"))) as client:
        yield client
