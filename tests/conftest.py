import os

os.environ["APP_ENV"] = "test"

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from dislike_service.main import app
from dislike_service.models import Post, RWModel, User
from tests.helpers import PASSWORD


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", poolclass=NullPool)
    async with engine.begin() as conn:
        await conn.run_sync(RWModel.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def pool(engine) -> async_sessionmaker[AsyncSession]:
    pool = async_sessionmaker(engine, expire_on_commit=False)
    app.state.pool = pool
    return pool


@pytest_asyncio.fixture
async def db_session(pool):
    async with pool() as session:
        yield session


@pytest_asyncio.fixture
async def async_client(pool):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def seeded(pool):
    """alice (u1), bob (u2) and tuit p1 by alice with 3 stored dislikes."""
    async with pool() as session:
        alice = User(id="u1", username="alice")
        alice.change_password(PASSWORD)
        bob = User(id="u2", username="bob")
        bob.change_password(PASSWORD)
        session.add_all([alice, bob])
        await session.flush()
        session.add(Post(id="p1", tuit="hello tuiter", posted_by_id="u1", dislikes=3))
        await session.commit()
