"""
Response envelope shared by all API endpoints.

Every response carries a `success` flag. Successful responses put their
payload under `data` (with an optional `message`); failures carry an
`error` string and, for validation failures, an `errors` map keyed by
field name.

    { "success": true,  "data": ..., "message": "..." }
    { "success": false, "error": "...", "errors": {"front": "..."} }
"""

from datetime import datetime
from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from flashstudy.models.card import Card, Difficulty

T = TypeVar("T")


class CardResponse(BaseModel):
    """Wire representation of a card."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    front: str
    back: str
    difficulty: Difficulty
    study_count: int
    last_studied_at: datetime | None = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_card(cls, card: Card) -> "CardResponse":
        """Build a response model from a domain card."""
        return cls.model_validate(card)


class SuccessResponse(BaseModel, Generic[T]):
    """Envelope for a successful operation."""

    success: Literal[True] = True
    data: T
    message: str | None = None


class CardListResponse(SuccessResponse[list[CardResponse]]):
    """Unpaged card listing."""

    count: int


class PaginatedCardsResponse(SuccessResponse[list[CardResponse]]):
    """One page of a card listing."""

    total: int
    page: int
    per_page: int
    total_pages: int


class StatsResponse(BaseModel):
    """Counters and averages for the Kanban overview."""

    total: int = 0
    not_studied: int = 0
    easy: int = 0
    medium: int = 0
    hard: int = 0
    total_studies: int = 0
    avg_studies_per_card: float = 0.0


class DeleteResult(BaseModel):
    """Payload returned after a delete."""

    id: int
    deleted: int = Field(..., description="Number of cards removed")


class ErrorResponse(BaseModel):
    """Envelope for a failed operation."""

    success: Literal[False] = False
    error: str
    errors: dict[str, str] | None = Field(
        default=None,
        description="Field-keyed messages (validation failures only)",
    )
    debug: dict[str, Any] | None = Field(
        default=None,
        description="Exception detail, present only when debug mode is on",
    )
