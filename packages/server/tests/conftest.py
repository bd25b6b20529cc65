"""
Shared fixtures: a per-test SQLite board and an ASGI client wired to it.
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker

from app.core.config import BoardConfig, Settings, get_settings
from app.core.database import get_session, init_db
from app.main import app
from app.services.tasks import TaskStore

PASSWORD = "s3cret-board"


@pytest.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'board.db'}")
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def session(session_factory):
    async with session_factory() as s:
        yield s


@pytest.fixture
def auth_headers():
    return {"X-Board-Password": PASSWORD}


@pytest.fixture
def board_config():
    return BoardConfig(password=PASSWORD, title="Test Board")


@pytest.fixture
def store(session, board_config):
    return TaskStore(session, board_config)


@pytest.fixture
async def client(session_factory):
    async def _get_session():
        async with session_factory() as s:
            try:
                yield s
                await s.commit()
            except Exception:
                await s.rollback()
                raise

    def _get_settings():
        return Settings(board_password=PASSWORD, board_title="Test Board")

    app.dependency_overrides[get_session] = _get_session
    app.dependency_overrides[get_settings] = _get_settings
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
