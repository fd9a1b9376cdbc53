"""
Study ordering engine.

Produces the review sequence: a total order over cards in which unrated
and poorly recalled cards come first and well-known cards drift to the
tail. The order is a pure function of the cards read from the store.

Priority (first differing key wins):
1. Difficulty class: not_studied, hard, medium, easy
2. study_count ascending
3. Never-studied (no last_studied_at) before studied
4. last_studied_at ascending (least recently reviewed first)
5. id ascending

INVARIANT: Every card read appears exactly once; two runs over an
unchanged store return the same sequence. Nothing is filtered out by
time, mastery, or chance.
"""

from collections.abc import Iterable
from datetime import UTC, datetime

from sqlalchemy.ext.asyncio import AsyncSession

from flashstudy.db.operations import card_to_model, list_all_cards
from flashstudy.models.card import Card, Difficulty

CLASS_RANK: dict[Difficulty, int] = {
    Difficulty.NOT_STUDIED: 0,
    Difficulty.HARD: 1,
    Difficulty.MEDIUM: 2,
    Difficulty.EASY: 3,
}

# Placeholder for a missing last_studied_at; key 3 already separates those cards
_NEVER = datetime.min.replace(tzinfo=UTC)

StudyKey = tuple[int, int, int, datetime, int]


def study_priority(card: Card) -> StudyKey:
    """
    Sort key implementing the review priority.

    A card precedes another exactly when its key is lexicographically
    smaller, so the whole rule can be checked by comparing keys.
    """
    studied_rank = 0 if card.last_studied_at is None else 1
    return (
        CLASS_RANK[card.difficulty],
        card.study_count,
        studied_rank,
        card.last_studied_at or _NEVER,
        card.id,
    )


def order_for_study(cards: Iterable[Card]) -> list[Card]:
    """Return the cards in review order."""
    return sorted(cards, key=study_priority)


async def list_for_study(
    session: AsyncSession,
    difficulty: Difficulty | None = None,
) -> list[Card]:
    """
    Read every card (optionally one difficulty class) and order it for review.

    Store failures propagate to the caller unchanged.
    """
    rows = await list_all_cards(session, difficulty=difficulty)
    return order_for_study(card_to_model(row) for row in rows)
