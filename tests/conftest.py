import os
import tempfile
from typing import AsyncGenerator
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# Settings are read at import time, so configure the environment before importing the app
os.environ["DATABASE_URL"] = TEST_DATABASE_URL
os.environ["SCHEDULER_ENABLED"] = "false"
os.environ["SEED_ENABLED"] = "false"
os.environ["RESEND_API_KEY"] = ""
os.environ["SECRET_KEY"] = "test-secret"
os.environ.setdefault("LOG_DIR", os.path.join(tempfile.gettempdir(), "wanderer-test-logs"))


@pytest_asyncio.fixture
async def test_engine():
    """Fresh in-memory database per test."""
    import wanderer.models  # noqa: F401
    from wanderer.database import Base

    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(test_engine):
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture(name="session")
async def session_fixture(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture(autouse=True)
def no_redis(monkeypatch):
    """Run without Redis; the cache degrades to misses."""
    from wanderer.services.cache_service import cache_service

    monkeypatch.setattr(cache_service, "_get_redis", AsyncMock(return_value=None))


@pytest_asyncio.fixture(name="client")
async def client_fixture(session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client against the app with the database dependency overridden.

    ASGITransport does not send lifespan events, so no scheduler or seeding runs.
    """
    from wanderer.database import get_db
    from wanderer.main import app

    async def get_db_override() -> AsyncGenerator[AsyncSession, None]:
        yield session

    app.dependency_overrides[get_db] = get_db_override

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
        yield client

    app.dependency_overrides.clear()


async def _make_user(session: AsyncSession, email: str, role: str = "user", **fields):
    from wanderer.models.user import User
    from wanderer.routers.auth import pwd_context

    user = User(
        email=email,
        password_hash=pwd_context.hash("secret123"),
        full_name=fields.pop("full_name", "Test User"),
        role=role,
        **fields,
    )
    session.add(user)
    await session.commit()
    await session.refresh(user)
    return user


@pytest_asyncio.fixture
async def user(session):
    return await _make_user(
        session,
        "traveler@example.com",
        full_name="Maria Santos",
        user_preferences={
            "categories": ["Nature"],
            "subcategories": ["Lakes"],
            "districts": ["District 2"],
        },
    )


@pytest_asyncio.fixture
async def admin(session):
    return await _make_user(session, "admin@example.com", role="admin", full_name="Admin")


def _headers(user) -> dict:
    from wanderer.routers.auth import create_access_token

    return {"Authorization": f"Bearer {create_access_token(str(user.id))}"}


@pytest.fixture
def auth_headers(user):
    return _headers(user)


@pytest.fixture
def admin_headers(admin):
    return _headers(admin)


@pytest_asyncio.fixture
async def catalog(session):
    """A small Albay catalog: five spots, two stays, three restaurants."""
    from wanderer.models.catalog import Accommodation, Restaurant, TouristSpot

    spots = [
        TouristSpot(
            name="Mayon Volcano", location="Legazpi City", municipality="Legazpi",
            category=["Nature", "Adventure"], rating=5.0, latitude=13.2548, longitude=123.6858,
        ),
        TouristSpot(
            name="Cagsawa Ruins", location="Daraga", municipality="Daraga",
            category=["Culture", "Heritage"], rating=4.5,
        ),
        TouristSpot(
            name="Sumlang Lake", location="Camalig", municipality="Camalig",
            category=["Nature", "Lakes"], rating=4.0,
        ),
        TouristSpot(
            name="Hoyop-Hoyopan Cave", location="Camalig", municipality="Camalig",
            category=["Adventure", "Caving"], is_hidden_gem=True,
        ),
        TouristSpot(
            name="Tiwi Hot Springs", location="Tiwi", municipality="Tiwi",
            category=["Nature"], rating=3.5,
        ),
    ]
    stays = [
        Accommodation(
            name="The Oriental Legazpi", location="Legazpi City", municipality="Legazpi",
            category=["Luxury", "Business Hotel"],
        ),
        Accommodation(
            name="Tabaco Inn", location="Tabaco City", municipality="Tabaco",
            category=["Budget"],
        ),
    ]
    restaurants = [
        Restaurant(name="1st Colonial Grill", location="Legazpi City", municipality="Legazpi"),
        Restaurant(name="Let's Cook", location="Daraga", municipality="Daraga"),
        Restaurant(name="Bigg's Diner", location="Tabaco City", municipality="Tabaco"),
    ]
    session.add_all(spots + stays + restaurants)
    await session.commit()
    return {
        "spots": {s.name: s for s in spots},
        "accommodations": {a.name: a for a in stays},
        "restaurants": {r.name: r for r in restaurants},
    }


@pytest_asyncio.fixture
async def other_headers(session):
    """Headers for a second, unrelated account."""
    other = await _make_user(session, "other@example.com", full_name="Other Traveler")
    return _headers(other)
