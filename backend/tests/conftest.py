"""Root conftest — shared test configuration, async DB and FastAPI test client.

Invariants:
    - Environment defaults set before any imgmod import (Settings is lru_cached)
    - Every DB test gets a fresh in-memory SQLite database with FKs enforced
    - get_db dependency overridden to use the test DB session
    - Tokens minted with the same secret the app verifies with
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-not-for-production")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)

from imgmod.core.domain_types import AccountRole  # noqa: E402
from imgmod.db.base import Base  # noqa: E402
from imgmod.infrastructure.database import (  # noqa: E402
    enable_sqlite_foreign_keys, get_db,
)
from imgmod.main import app  # noqa: E402
from imgmod.models.account import Account  # noqa: E402
from imgmod.models.image import Image  # noqa: E402
from tests.auth_helpers import auth_header  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def seed_accounts(test_db):
    """Two accounts: a regular user and an admin."""
    user = Account(
        id="user1", email="test1@example.com", password="hashed-1",
    )
    admin = Account(
        id="admin1", email="admin@example.com", password="hashed-2",
        role=AccountRole.ADMIN.value,
    )
    test_db.add_all([user, admin])
    await test_db.commit()
    return {"user": user, "admin": admin}


@pytest.fixture
async def seed_images(test_db, seed_accounts):
    """Two pending images (user1, admin1) and one approved image."""
    images = [
        Image(id="img1", url="https://cdn.test/1.png", status="pending", owner_id="user1"),
        Image(id="img2", url="https://cdn.test/2.png", status="pending", owner_id="admin1"),
        Image(id="img3", url="https://cdn.test/3.png", status="approved", owner_id="user1"),
    ]
    test_db.add_all(images)
    await test_db.commit()
    return images


@pytest.fixture
def user_headers():
    return auth_header("user1", "test1@example.com")


@pytest.fixture
def admin_headers():
    return auth_header("admin1", "admin@example.com", AccountRole.ADMIN)
