"""
Study statistics aggregation.

Computes the Kanban overview counters with a single aggregate query, so
the result reflects one consistent snapshot of the flashcards table.
"""

from dataclasses import asdict, dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from sqlalchemy import ColumnElement, case, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from flashstudy.models.card import Difficulty
from flashstudy.models.db import FlashcardDB


@dataclass(frozen=True, slots=True)
class StudyStats:
    """Counters and averages over all cards."""

    total: int = 0
    not_studied: int = 0
    easy: int = 0
    medium: int = 0
    hard: int = 0
    total_studies: int = 0
    avg_studies_per_card: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def average_studies(total_studies: int, total: int) -> float:
    """Mean study_count per card, 0.0 for an empty store."""
    if total <= 0:
        return 0.0
    # Decimal division keeps ties such as 0.25 exact
    mean = Decimal(total_studies) / Decimal(total)
    return float(mean.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def _class_count(difficulty: Difficulty) -> ColumnElement[int]:
    return func.coalesce(
        func.sum(case((FlashcardDB.difficulty == difficulty, 1), else_=0)),
        0,
    )


async def compute_stats(session: AsyncSession) -> StudyStats:
    """Compute all counters in one pass over the flashcards table."""
    stmt = select(
        func.count(FlashcardDB.id),
        _class_count(Difficulty.NOT_STUDIED),
        _class_count(Difficulty.EASY),
        _class_count(Difficulty.MEDIUM),
        _class_count(Difficulty.HARD),
        func.coalesce(func.sum(FlashcardDB.study_count), 0),
    )
    row = (await session.execute(stmt)).one()
    total, not_studied, easy, medium, hard, total_studies = (int(v) for v in row)

    return StudyStats(
        total=total,
        not_studied=not_studied,
        easy=easy,
        medium=medium,
        hard=hard,
        total_studies=total_studies,
        avg_studies_per_card=average_studies(total_studies, total),
    )
