"""
Flashcard API endpoints.

CRUD on cards plus the study endpoints: the review sequence
(?filter=study), rating (PATCH /{id}/difficulty) and the statistics
behind the Kanban overview. Handlers only decode, dispatch and encode;
ordering, rating and aggregation live in flashstudy.services.
"""

import logging
from typing import Annotated, Literal

from fastapi import APIRouter, Depends, Path, Query, status
from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncSession

from flashstudy.db import (
    card_to_model,
    count_cards,
    delete_card,
    get_card,
    insert_card,
    list_cards,
    update_card_content,
)
from flashstudy.db.database import get_session
from flashstudy.models.card import Card, Difficulty, parse_difficulty
from flashstudy.models.envelope import (
    CardListResponse,
    CardResponse,
    DeleteResult,
    PaginatedCardsResponse,
    StatsResponse,
    SuccessResponse,
)
from flashstudy.models.errors import CardNotFoundError, InvalidRatingError
from flashstudy.services.card_content import validate_card_content
from flashstudy.services.pagination import Page, paginate, validate_paging
from flashstudy.services.rating import apply_difficulty
from flashstudy.services.stats import compute_stats
from flashstudy.services.study_order import list_for_study

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/flashcards", tags=["flashcards"])

CardId = Annotated[int, Path(gt=0, description="Flashcard id")]


class CardContentRequest(BaseModel):
    """Request body for creating or editing a card."""

    front: str | None = Field(
        default=None,
        description="Prompt side, 1-1000 characters after trimming",
        examples=["What does REST stand for?"],
    )
    back: str | None = Field(
        default=None,
        description="Answer side, 1-1000 characters after trimming",
        examples=["Representational State Transfer"],
    )


class DifficultyRequest(BaseModel):
    """Request body for rating or reclassifying a card."""

    difficulty: str | None = Field(
        default=None,
        description="One of not_studied, easy, medium, hard",
        examples=["hard"],
    )


def _to_response(cards: list[Card]) -> list[CardResponse]:
    return [CardResponse.from_card(card) for card in cards]


def _page_response(page: Page[Card]) -> PaginatedCardsResponse:
    return PaginatedCardsResponse(
        data=_to_response(page.items),
        total=page.total,
        page=page.page,
        per_page=page.per_page,
        total_pages=page.total_pages,
    )


@router.get("", response_model=CardListResponse | PaginatedCardsResponse)
async def list_flashcards(
    session: Annotated[AsyncSession, Depends(get_session)],
    filter_: Annotated[Literal["study"] | None, Query(alias="filter")] = None,
    difficulty: Annotated[Difficulty | None, Query()] = None,
    page: Annotated[int | None, Query()] = None,
    per_page: Annotated[int | None, Query()] = None,
) -> CardListResponse | PaginatedCardsResponse:
    """
    List flashcards.

    - filter=study returns the review sequence (priority order)
    - difficulty=<level> restricts the listing to one class
    - otherwise cards are listed newest first

    Passing page or per_page switches to a paginated response.
    """
    paging = validate_paging(page, per_page) if page is not None or per_page is not None else None

    if filter_ == "study":
        cards = await list_for_study(session, difficulty=difficulty)
        if paging is None:
            return CardListResponse(data=_to_response(cards), count=len(cards))
        return _page_response(paginate(cards, paging))

    if paging is None:
        rows = await list_cards(session, difficulty=difficulty)
        cards = [card_to_model(row) for row in rows]
        return CardListResponse(data=_to_response(cards), count=len(cards))

    total = await count_cards(session, difficulty=difficulty)
    rows = await list_cards(
        session, difficulty=difficulty, offset=paging.offset, limit=paging.per_page
    )
    return _page_response(
        Page(
            items=[card_to_model(row) for row in rows],
            total=total,
            page=paging.page,
            per_page=paging.per_page,
        )
    )


@router.get("/stats", response_model=SuccessResponse[StatsResponse])
async def get_flashcard_stats(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> SuccessResponse[StatsResponse]:
    """
    Get study statistics.

    Counts per difficulty class, total ratings applied, and the average
    number of ratings per card.
    """
    stats = await compute_stats(session)
    return SuccessResponse[StatsResponse](data=StatsResponse(**stats.to_dict()))


@router.get("/{card_id}", response_model=SuccessResponse[CardResponse])
async def get_flashcard(
    card_id: CardId,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> SuccessResponse[CardResponse]:
    """Get a single flashcard. Returns 404 if it does not exist."""
    db_card = await get_card(session, card_id)
    if db_card is None:
        raise CardNotFoundError(card_id)

    return SuccessResponse[CardResponse](data=CardResponse.from_card(card_to_model(db_card)))


@router.post(
    "",
    response_model=SuccessResponse[CardResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_flashcard(
    request: CardContentRequest,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> SuccessResponse[CardResponse]:
    """
    Create a flashcard.

    Front and back are trimmed and must each be 1-1000 characters.
    New cards start as not_studied with a study_count of 0.
    """
    content = validate_card_content(request.front, request.back)
    card = card_to_model(await insert_card(session, content.front, content.back))
    await session.commit()

    logger.info("Created card %d", card.id)
    return SuccessResponse[CardResponse](
        data=CardResponse.from_card(card),
        message="Flashcard created successfully",
    )


@router.put("/{card_id}", response_model=SuccessResponse[CardResponse])
async def update_flashcard(
    card_id: CardId,
    request: CardContentRequest,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> SuccessResponse[CardResponse]:
    """
    Edit a flashcard's front and back.

    Rating state (difficulty, study_count, last_studied_at) is not touched.
    """
    content = validate_card_content(request.front, request.back)
    card = card_to_model(await update_card_content(session, card_id, content.front, content.back))
    await session.commit()

    logger.info("Updated card %d", card.id)
    return SuccessResponse[CardResponse](
        data=CardResponse.from_card(card),
        message="Flashcard updated successfully",
    )


@router.delete("/{card_id}", response_model=SuccessResponse[DeleteResult])
async def delete_flashcard(
    card_id: CardId,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> SuccessResponse[DeleteResult]:
    """Delete a flashcard. Returns 404 if it does not exist."""
    if not await delete_card(session, card_id):
        raise CardNotFoundError(card_id)
    await session.commit()

    logger.info("Deleted card %d", card_id)
    return SuccessResponse[DeleteResult](
        data=DeleteResult(id=card_id, deleted=1),
        message="Flashcard deleted successfully",
    )


@router.patch("/{card_id}/difficulty", response_model=SuccessResponse[CardResponse])
async def update_flashcard_difficulty(
    card_id: CardId,
    request: DifficultyRequest,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> SuccessResponse[CardResponse]:
    """
    Rate a flashcard, or move it back to not_studied.

    easy, medium and hard count as a study: study_count goes up by one and
    last_studied_at is set. not_studied resets the card, clearing its
    study_count and last_studied_at (used by the Kanban board).
    """
    difficulty = parse_difficulty(request.difficulty) if request.difficulty else None
    if difficulty is None:
        raise InvalidRatingError(str(request.difficulty))

    card = await apply_difficulty(session, card_id, difficulty)
    await session.commit()

    return SuccessResponse[CardResponse](
        data=CardResponse.from_card(card),
        message="Difficulty updated successfully",
    )
