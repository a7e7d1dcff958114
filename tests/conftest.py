"""
Shared test fixtures.

Everything runs in-process:
- The engine is a plain object, no infrastructure at all
- HTTP server → httpx.AsyncClient with ASGI transport (no network)
- The session store is swapped for a small per-test one via
  dependency_overrides, so tests are fully isolated
"""

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from api.dependencies import get_session_store
from api.main import create_app
from api.session_store import SessionStore
from scheduler.engine import SchedulerEngine


@pytest.fixture
def make_engine():
    """Factory: make_engine("psjf", cores=2) → a started SchedulerEngine."""
    engines = []

    def _make(policy, cores=1, **policy_kwargs) -> SchedulerEngine:
        engine = SchedulerEngine()
        engine.start_up(cores, policy, **policy_kwargs)
        engines.append(engine)
        return engine

    yield _make

    for engine in engines:
        engine.clean_up()


@pytest.fixture
def session_store():
    """A small store so the session limit is easy to hit."""
    store = SessionStore(max_sessions=4)
    yield store
    store.close_all()


@pytest_asyncio.fixture
async def client(session_store):
    """
    Create a test HTTP client that talks directly to the FastAPI app.

    dependency_overrides tells FastAPI: "instead of the store created at
    startup, use this one". ASGITransport does not run the lifespan, so
    the override is also what makes the store exist at all.
    """
    app = create_app()
    app.dependency_overrides[get_session_store] = lambda: session_store

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
