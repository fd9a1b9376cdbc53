"""
Typed errors for flashcard operations.

Components raise these; the API layer is the only place that turns them
into HTTP responses (see flashstudy.api.errors). Each error carries a
transport-neutral kind and the status code it maps to.
"""

from enum import Enum

from flashstudy.models.card import VALID_DIFFICULTIES


class ErrorKind(str, Enum):
    """Classification of failure types."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    BAD_REQUEST = "bad_request"
    CONFLICT = "conflict"  # reserved
    INTERNAL = "internal"


class FlashcardError(Exception):
    """
    Base class for errors the system knows how to explain.

    Attributes:
        kind: Classification of the failure
        message: User-appropriate explanation
        errors: Field-keyed messages (validation failures only)
        status_code: HTTP status the error maps to
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        errors: dict[str, str] | None = None,
        status_code: int = 400,
    ):
        self.kind = kind
        self.message = message
        self.errors = errors
        self.status_code = status_code
        super().__init__(message)


class ValidationFailedError(FlashcardError):
    """Raised when request input fails a length, trim, or enum check."""

    def __init__(self, errors: dict[str, str]):
        super().__init__(
            kind=ErrorKind.VALIDATION,
            message="Validation failed",
            errors=errors,
            status_code=422,
        )


class InvalidRatingError(ValidationFailedError):
    """Raised when a rating is outside the allowed set."""

    def __init__(self, value: str, allowed: tuple[str, ...] = VALID_DIFFICULTIES):
        self.value = value
        super().__init__({"difficulty": f"Difficulty must be one of: {', '.join(allowed)}"})


class CardNotFoundError(FlashcardError):
    """Raised when no card has the requested id."""

    def __init__(self, card_id: int):
        self.card_id = card_id
        super().__init__(
            kind=ErrorKind.NOT_FOUND,
            message="Flashcard not found",
            status_code=404,
        )


class BadRequestError(FlashcardError):
    """Raised for malformed ids, query parameters, or payloads."""

    def __init__(self, message: str, errors: dict[str, str] | None = None):
        super().__init__(
            kind=ErrorKind.BAD_REQUEST,
            message=message,
            errors=errors,
            status_code=400,
        )


class ConflictError(FlashcardError):
    """Reserved for state conflicts. No current operation raises it."""

    def __init__(self, message: str):
        super().__init__(kind=ErrorKind.CONFLICT, message=message, status_code=409)
