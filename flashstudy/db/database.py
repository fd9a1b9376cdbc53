"""
Database engine and session management.

One async engine per process, built from settings.database_url. Request
handlers borrow a session through the get_session dependency; jobs open
their own from async_session_factory.
"""

import logging
from collections.abc import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from flashstudy.config import settings
from flashstudy.models.db import Base

logger = logging.getLogger(__name__)

engine = create_async_engine(
    settings.database_url,
    echo=settings.debug,
    pool_pre_ping=True,
)

# Loaded cards stay readable after commit; responses are built from them
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency yielding one session per request.

    Handlers that write commit before building their response, so a
    failed commit surfaces as an error instead of a success the client
    has already seen. The commit after yield only closes the transaction
    of read-only requests. Any database error rolls the request back.
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except SQLAlchemyError:
            await session.rollback()
            raise


async def ping_database(session: AsyncSession) -> bool:
    """Return True if the database answers a trivial query."""
    try:
        await session.execute(text("SELECT 1"))
    except Exception:
        logger.warning("Database ping failed", exc_info=True)
        return False
    return True


async def init_db() -> None:
    """Create the flashcards table and its indexes if they are missing."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
