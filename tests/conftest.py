from pathlib import Path

import httpx
import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from duelcatalog.db.database import get_session
from duelcatalog.main import app
from duelcatalog.models.db import Base
from duelcatalog.scrapers.duelmasters_wiki import get_wiki_client

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def card_page_html() -> str:
    """Wiki page for Bolshack Dragon."""
    return (FIXTURES / "bolshack_dragon.html").read_text(encoding="utf-8")


@pytest.fixture
async def async_engine():
    """Create an in-memory SQLite engine for testing."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def session_factory(async_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(async_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def session(session_factory) -> AsyncSession:
    """Provide a database session for tests."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def wiki_pages() -> dict[str, str]:
    """Wiki pages served to the API under test, keyed by URL path."""
    return {}


@pytest.fixture
async def client(session_factory, wiki_pages):
    """Provide an async test client with overridden database session and wiki client."""

    async def override_get_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    def serve_wiki(request: httpx.Request) -> httpx.Response:
        if request.url.path in wiki_pages:
            return httpx.Response(200, text=wiki_pages[request.url.path])
        return httpx.Response(404, text="There is currently no text in this page.")

    async def override_get_wiki_client():
        async with httpx.AsyncClient(transport=httpx.MockTransport(serve_wiki)) as wiki:
            yield wiki

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_wiki_client] = override_get_wiki_client

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
