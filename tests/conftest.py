"""
Shared fixtures: a throwaway SQLite database per test and an HTTP client
bound to an app that uses it.
"""

import httpx
import pytest
import pytest_asyncio

from config.settings import config
from database.session import Database


@pytest.fixture(autouse=True)
def fast_bcrypt(monkeypatch):
    """Minimum bcrypt cost so hashing doesn't dominate the test run."""
    monkeypatch.setattr(config, "bcrypt_rounds", 4)


@pytest.fixture
def database_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'accounts.db'}"


@pytest_asyncio.fixture
async def database(database_url):
    db = Database(database_url)
    await db.create_all()
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def session(database):
    async with database.session() as s:
        yield s


@pytest.fixture
def app(database):
    from main import create_app

    return create_app(database)


@pytest_asyncio.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
