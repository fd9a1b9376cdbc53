"""
Database CRUD operations.

Provides async functions for creating, reading, updating, and deleting
flashcards. Every mutation is a single SQL statement so concurrent
requests on the same card cannot interleave inside it.
"""

from datetime import UTC, datetime

from sqlalchemy import ColumnElement, DateTime, case, delete, func, literal, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from flashstudy.models.card import Card, Difficulty
from flashstudy.models.db import FlashcardDB
from flashstudy.models.errors import CardNotFoundError


def _now() -> datetime:
    return datetime.now(UTC)


def _as_utc(value: datetime | None) -> datetime | None:
    """Attach UTC to timestamps read back from backends that drop tzinfo."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=UTC)


# --- Reads ---


async def get_card(session: AsyncSession, card_id: int) -> FlashcardDB | None:
    """
    Get a card by id.

    Returns None if no card has this id.
    """
    return await session.get(FlashcardDB, card_id, populate_existing=True)


async def list_cards(
    session: AsyncSession,
    difficulty: Difficulty | None = None,
    offset: int | None = None,
    limit: int | None = None,
) -> list[FlashcardDB]:
    """Get cards newest first, optionally filtered by difficulty and paged."""
    stmt = select(FlashcardDB).order_by(FlashcardDB.created_at.desc(), FlashcardDB.id.desc())
    if difficulty is not None:
        stmt = stmt.where(FlashcardDB.difficulty == difficulty)
    if offset is not None:
        stmt = stmt.offset(offset)
    if limit is not None:
        stmt = stmt.limit(limit)

    result = await session.execute(stmt)
    return list(result.scalars().all())


async def list_all_cards(
    session: AsyncSession, difficulty: Difficulty | None = None
) -> list[FlashcardDB]:
    """Get every card in id order. Callers impose their own ordering."""
    stmt = select(FlashcardDB).order_by(FlashcardDB.id)
    if difficulty is not None:
        stmt = stmt.where(FlashcardDB.difficulty == difficulty)

    result = await session.execute(stmt)
    return list(result.scalars().all())


async def count_cards(session: AsyncSession, difficulty: Difficulty | None = None) -> int:
    """Count cards, optionally within one difficulty class."""
    stmt = select(func.count()).select_from(FlashcardDB)
    if difficulty is not None:
        stmt = stmt.where(FlashcardDB.difficulty == difficulty)

    result = await session.execute(stmt)
    return int(result.scalar_one())


# --- Writes ---


async def insert_card(session: AsyncSession, front: str, back: str) -> FlashcardDB:
    """
    Create a new card in the initial rating state.

    The database assigns the id on flush.
    """
    now = _now()
    card = FlashcardDB(
        front=front,
        back=back,
        difficulty=Difficulty.NOT_STUDIED,
        study_count=0,
        last_studied_at=None,
        created_at=now,
        updated_at=now,
    )
    session.add(card)
    await session.flush()
    return card


async def update_card_content(
    session: AsyncSession, card_id: int, front: str, back: str
) -> FlashcardDB:
    """
    Replace a card's front and back.

    Rating state is left untouched. Raises CardNotFoundError if absent.
    """
    result = await session.execute(
        update(FlashcardDB)
        .where(FlashcardDB.id == card_id)
        .values(front=front, back=back, updated_at=_later_of_updated_at(_now()))
        .execution_options(synchronize_session=False)
    )
    return await _reload_or_raise(session, card_id, result.rowcount)  # type: ignore[attr-defined]


async def update_card_rating(
    session: AsyncSession,
    card_id: int,
    difficulty: Difficulty,
    count_delta: int = 1,
) -> FlashcardDB:
    """
    Apply a rating to a card as one atomic read-modify-write.

    Sets the difficulty, adds count_delta to study_count in SQL, and stamps
    last_studied_at and updated_at with the same value. The stamp never goes
    below the stored updated_at, so racing writers cannot move it backwards.

    Raises CardNotFoundError if absent.
    """
    stamp = _later_of_updated_at(_now())
    result = await session.execute(
        update(FlashcardDB)
        .where(FlashcardDB.id == card_id)
        .values(
            difficulty=difficulty,
            study_count=FlashcardDB.study_count + count_delta,
            last_studied_at=stamp,
            updated_at=stamp,
        )
        .execution_options(synchronize_session=False)
    )
    return await _reload_or_raise(session, card_id, result.rowcount)  # type: ignore[attr-defined]


async def reset_card_rating(session: AsyncSession, card_id: int) -> FlashcardDB:
    """
    Return a card to the initial rating state.

    Clears study_count and last_studied_at together with the difficulty.
    Raises CardNotFoundError if absent.
    """
    result = await session.execute(
        update(FlashcardDB)
        .where(FlashcardDB.id == card_id)
        .values(
            difficulty=Difficulty.NOT_STUDIED,
            study_count=0,
            last_studied_at=None,
            updated_at=_later_of_updated_at(_now()),
        )
        .execution_options(synchronize_session=False)
    )
    return await _reload_or_raise(session, card_id, result.rowcount)  # type: ignore[attr-defined]


async def delete_card(session: AsyncSession, card_id: int) -> bool:
    """
    Delete a card.

    Returns True if deleted, False if not found.
    """
    result = await session.execute(
        delete(FlashcardDB)
        .where(FlashcardDB.id == card_id)
        .execution_options(synchronize_session=False)
    )
    # rowcount is available on DELETE results; type stubs incomplete for async
    return int(result.rowcount) > 0  # type: ignore[attr-defined]


async def delete_all_cards(session: AsyncSession) -> int:
    """
    Delete every card.

    Returns the number of deleted records.
    """
    result = await session.execute(delete(FlashcardDB))
    return int(result.rowcount)  # type: ignore[attr-defined]


def card_to_model(db_card: FlashcardDB) -> Card:
    """Convert a database card to a domain model."""
    return Card(
        id=db_card.id,
        front=db_card.front,
        back=db_card.back,
        difficulty=Difficulty(db_card.difficulty),
        study_count=db_card.study_count,
        last_studied_at=_as_utc(db_card.last_studied_at),
        created_at=_as_utc(db_card.created_at),  # type: ignore[arg-type]
        updated_at=_as_utc(db_card.updated_at),  # type: ignore[arg-type]
    )


# --- Helpers ---


def _later_of_updated_at(now: datetime) -> ColumnElement[datetime]:
    """SQL expression for max(updated_at, now), evaluated inside the UPDATE."""
    bound_now = literal(now, DateTime(timezone=True))
    return case((FlashcardDB.updated_at > bound_now, FlashcardDB.updated_at), else_=bound_now)


async def _reload_or_raise(session: AsyncSession, card_id: int, rowcount: int) -> FlashcardDB:
    if not rowcount:
        raise CardNotFoundError(card_id)

    card = await get_card(session, card_id)
    if card is None:
        raise CardNotFoundError(card_id)
    return card
