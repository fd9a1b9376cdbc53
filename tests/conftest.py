import os

# Keep the module-level engine off the production database during tests
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from collections.abc import Awaitable, Callable  # noqa: E402
from datetime import UTC, datetime, timedelta  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from flashstudy.db.database import get_session  # noqa: E402
from flashstudy.main import app  # noqa: E402
from flashstudy.models.card import Difficulty  # noqa: E402
from flashstudy.models.db import Base, FlashcardDB  # noqa: E402

# Fixed reference times for seeding cards with a known history
T0 = datetime(2025, 10, 1, 9, 0, tzinfo=UTC)
T1 = T0 + timedelta(hours=1)
T2 = T0 + timedelta(hours=2)
T3 = T0 + timedelta(hours=3)

SeedCard = Callable[..., Awaitable[FlashcardDB]]


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
async def session(async_engine) -> AsyncSession:
    """Provide a database session for tests."""
    async_session = async_sessionmaker(async_engine, class_=AsyncSession, expire_on_commit=False)
    async with async_session() as session:
        yield session


@pytest.fixture
def seed_card(async_engine) -> SeedCard:
    """
    Insert a card with an explicit rating state, committed in its own session.

    Lets tests build the exact store contents a scenario describes without
    going through the rating endpoints.
    """
    async_session = async_sessionmaker(async_engine, class_=AsyncSession, expire_on_commit=False)

    async def _seed(
        front: str = "Q",
        back: str = "A",
        difficulty: Difficulty = Difficulty.NOT_STUDIED,
        study_count: int = 0,
        last_studied_at: datetime | None = None,
        created_at: datetime = T0,
    ) -> FlashcardDB:
        card = FlashcardDB(
            front=front,
            back=back,
            difficulty=difficulty,
            study_count=study_count,
            last_studied_at=last_studied_at,
            created_at=created_at,
            updated_at=max(created_at, last_studied_at or created_at),
        )
        async with async_session() as session:
            session.add(card)
            await session.commit()
        return card

    return _seed


@pytest.fixture
async def client(async_engine):
    """Provide an async test client with overridden database session."""
    async_session = async_sessionmaker(async_engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_session():
        async with async_session() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_session] = override_get_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
