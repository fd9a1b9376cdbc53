from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class Difficulty(str, Enum):
    """Rating classes a card can be in."""

    NOT_STUDIED = "not_studied"
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


# Values a user may grade a card with. NOT_STUDIED is the initial state only.
RATINGS: frozenset[Difficulty] = frozenset({Difficulty.EASY, Difficulty.MEDIUM, Difficulty.HARD})

VALID_DIFFICULTIES: tuple[str, ...] = tuple(d.value for d in Difficulty)
RATING_VALUES: tuple[str, ...] = tuple(d.value for d in Difficulty if d in RATINGS)


def parse_difficulty(value: str) -> Difficulty | None:
    """Return the Difficulty for a raw string, or None if it is not one."""
    try:
        return Difficulty(value)
    except ValueError:
        return None


@dataclass(frozen=True, slots=True)
class Card:
    """
    A flashcard with its rating state.

    Attributes:
        id: Server-assigned identifier, never reused
        front: Prompt side, trimmed
        back: Answer side, trimmed
        difficulty: Current rating class
        study_count: Number of ratings applied to the card
        last_studied_at: Time of the most recent rating (None until rated)
        created_at: Insert time
        updated_at: Time of the most recent edit or rating
    """

    id: int
    front: str
    back: str
    difficulty: Difficulty
    study_count: int
    last_studied_at: datetime | None
    created_at: datetime
    updated_at: datetime
