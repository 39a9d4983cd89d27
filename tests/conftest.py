"""Shared test fixtures."""

from datetime import datetime, timezone

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from findingdesk.db.base import Base
# Import all models to register with Base.metadata
import findingdesk.db.models  # noqa: F401
from findingdesk.editor.finding_editor import FindingEditor
from findingdesk.services.actor import StaticActorProvider
from findingdesk.services.navigation import RecordingNavigator
from findingdesk.services.notifications import CollectingNotifier

from fakes import FakeFindingStore

FIXED_NOW = datetime(2024, 3, 5, 14, 7, tzinfo=timezone.utc)


@pytest.fixture
def now():
    return FIXED_NOW


@pytest.fixture
def store():
    return FakeFindingStore()


@pytest.fixture
def notifier():
    return CollectingNotifier()


@pytest.fixture
def navigator():
    return RecordingNavigator()


@pytest.fixture
def actor_provider():
    return StaticActorProvider("user-42", "tester@leverancier.nl")


@pytest.fixture
def make_editor(notifier, navigator, actor_provider, now):
    """Build an editor over the given store with the shared sinks."""

    def _make(store, actor=None):
        return FindingEditor(
            store,
            actor or actor_provider,
            notifier,
            navigator,
            clock=lambda: now,
            default_supplier="ivention",
            overview_path="/supplieroverview",
        )

    return _make


@pytest.fixture
def editor(make_editor, store):
    return make_editor(store)


@pytest.fixture
async def db_engine():
    """Create an in-memory SQLite async engine for testing."""
    engine = create_async_engine("sqlite+aiosqlite:///", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db_session(db_engine):
    """Create a test database session."""
    session_factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session


@pytest.fixture
def app(db_engine):
    """Create a test application instance with in-memory DB."""
    from findingdesk.main import create_app

    _app = create_app()
    _app.state.db_engine = db_engine
    _app.state.db_session_factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    return _app


@pytest.fixture
async def client(app):
    """Async HTTP test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
