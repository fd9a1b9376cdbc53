from flashstudy.models.card import (
    RATING_VALUES,
    RATINGS,
    VALID_DIFFICULTIES,
    Card,
    Difficulty,
    parse_difficulty,
)
from flashstudy.models.envelope import (
    CardListResponse,
    CardResponse,
    DeleteResult,
    ErrorResponse,
    PaginatedCardsResponse,
    StatsResponse,
    SuccessResponse,
)
from flashstudy.models.errors import (
    BadRequestError,
    CardNotFoundError,
    ConflictError,
    ErrorKind,
    FlashcardError,
    InvalidRatingError,
    ValidationFailedError,
)

__all__ = [
    "BadRequestError",
    "Card",
    "CardListResponse",
    "CardNotFoundError",
    "CardResponse",
    "ConflictError",
    "DeleteResult",
    "Difficulty",
    "ErrorKind",
    "ErrorResponse",
    "FlashcardError",
    "InvalidRatingError",
    "PaginatedCardsResponse",
    "RATINGS",
    "RATING_VALUES",
    "StatsResponse",
    "SuccessResponse",
    "VALID_DIFFICULTIES",
    "ValidationFailedError",
    "parse_difficulty",
]
