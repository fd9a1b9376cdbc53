"""
Rating applier.

Moves a card through its rating state machine:

    (not_studied, 0) --rate r--> (r, 1)
    (d, n)           --rate r--> (r, n + 1)     r in {easy, medium, hard}
    (any)            --reset---> (not_studied, 0)

Rating never returns a card to not_studied; only an explicit reset does,
and the reset clears study_count and last_studied_at with it so that
study_count == 0 exactly when the card is unrated.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from flashstudy.db.operations import card_to_model, reset_card_rating, update_card_rating
from flashstudy.models.card import RATING_VALUES, RATINGS, Card, Difficulty
from flashstudy.models.errors import InvalidRatingError

logger = logging.getLogger(__name__)


async def rate_card(session: AsyncSession, card_id: int, difficulty: Difficulty | str) -> Card:
    """
    Record one rating of a card.

    Sets the difficulty, increments study_count by one, and stamps
    last_studied_at and updated_at with the same time.

    Raises:
        InvalidRatingError: difficulty is not easy, medium, or hard
        CardNotFoundError: no card has this id
    """
    rating = _as_rating(difficulty)
    db_card = await update_card_rating(session, card_id, rating, count_delta=1)
    card = card_to_model(db_card)

    logger.info(
        "Rated card %d as %s (study_count=%d)",
        card.id,
        card.difficulty.value,
        card.study_count,
    )
    return card


async def reset_card(session: AsyncSession, card_id: int) -> Card:
    """
    Return a card to not_studied, clearing its study history.

    Raises:
        CardNotFoundError: no card has this id
    """
    db_card = await reset_card_rating(session, card_id)
    card = card_to_model(db_card)

    logger.info("Reset card %d to not_studied", card.id)
    return card


async def apply_difficulty(session: AsyncSession, card_id: int, difficulty: Difficulty) -> Card:
    """
    Apply a difficulty chosen by the client.

    not_studied is an administrative reclassification and resets the card;
    any other value is a rating.
    """
    if difficulty is Difficulty.NOT_STUDIED:
        return await reset_card(session, card_id)
    return await rate_card(session, card_id, difficulty)


def _as_rating(value: Difficulty | str) -> Difficulty:
    try:
        rating = Difficulty(value)
    except ValueError:
        raise InvalidRatingError(str(value), allowed=RATING_VALUES) from None

    if rating not in RATINGS:
        raise InvalidRatingError(rating.value, allowed=RATING_VALUES)
    return rating
