"""Shared pytest fixtures configured to use SQLite in-memory for tests."""

import logging
import os

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

# Tell app lifespan to skip real DB init
os.environ.setdefault("NOTEFUL_SKIP_LIFESPAN_DB", "1")

from noteful.config import Settings, get_settings  # noqa: E402
from noteful.core.models import BaseModel, Folder, Note  # noqa: E402
from noteful.database import get_db_session  # noqa: E402
from noteful.main import app  # noqa: E402

from .factories import make_folders_array, make_notes_array, parse_timestamp  # noqa: E402

# Silence extremely verbose DEBUG logs from aiosqlite to keep test output readable
logging.getLogger("aiosqlite").setLevel(logging.WARNING)

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
TEST_API_TOKEN = "test-api-token"


@pytest.fixture
def test_settings():
    """Override settings for testing using SQLite in-memory DB."""
    return Settings(
        database_url=TEST_DATABASE_URL,
        api_token=TEST_API_TOKEN,
        debug=True,
    )


@pytest.fixture
async def test_engine():
    """Fresh in-memory database per test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,  # keep the same memory DB across connections
        connect_args={"check_same_thread": False},
    )

    # SQLite only enforces ON DELETE CASCADE with foreign keys switched on
    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):  # noqa: ANN001
        cursor = dbapi_connection.cursor()
        try:
            cursor.execute("PRAGMA foreign_keys=ON")
        finally:
            cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def test_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def test_app(session_factory, test_settings):
    """App with the DB session and settings dependencies overridden."""

    async def _override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = _override_get_db
    app.dependency_overrides[get_settings] = lambda: test_settings
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def client(test_app):
    """Async client speaking HTTP to the app in-process."""
    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {TEST_API_TOKEN}"}


@pytest.fixture
def insert_folders(session_factory):
    """Insert folder rows directly, bypassing the API."""

    async def _insert(rows):
        async with session_factory() as session:
            session.add_all([Folder(**row) for row in rows])
            await session.commit()

    return _insert


@pytest.fixture
def insert_notes(session_factory):
    """Insert note rows directly, bypassing the API (and its sanitization)."""

    async def _insert(rows):
        async with session_factory() as session:
            session.add_all(
                [
                    Note(
                        **{
                            **row,
                            "modified": parse_timestamp(row["modified"]),
                            "folder_id": int(row["folder_id"]),
                        }
                    )
                    for row in rows
                ]
            )
            await session.commit()

    return _insert


@pytest.fixture
async def seeded_folders(insert_folders):
    folders = make_folders_array()
    await insert_folders(folders)
    return folders


@pytest.fixture
async def seeded_notes(seeded_folders, insert_notes):
    notes = make_notes_array()
    await insert_notes(notes)
    return notes
