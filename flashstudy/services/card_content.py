"""
Card content validation.

Front and back are trimmed before they are checked or stored. Length is
counted in characters (code points) of the trimmed text.
"""

from dataclasses import dataclass

from flashstudy.config import MAX_CONTENT_LENGTH
from flashstudy.models.errors import ValidationFailedError

_SIDE_LABELS = {"front": "Front side", "back": "Back side"}


@dataclass(frozen=True, slots=True)
class CardContent:
    """Validated, trimmed card sides."""

    front: str
    back: str


def _check_side(name: str, value: object) -> tuple[str | None, str | None]:
    """Return (trimmed value, error message) for one side."""
    label = _SIDE_LABELS[name]

    if value is None:
        return None, f"{label} is required"
    if not isinstance(value, str):
        return None, f"{label} must be a string"

    trimmed = value.strip()
    if not trimmed:
        return None, f"{label} is required"
    if len(trimmed) > MAX_CONTENT_LENGTH:
        return None, f"{label} must not exceed {MAX_CONTENT_LENGTH} characters"
    return trimmed, None


def validate_card_content(front: object, back: object) -> CardContent:
    """
    Validate and trim both sides of a card.

    Raises:
        ValidationFailedError: with one message per failing side
    """
    errors: dict[str, str] = {}

    clean_front, front_error = _check_side("front", front)
    if front_error:
        errors["front"] = front_error

    clean_back, back_error = _check_side("back", back)
    if back_error:
        errors["back"] = back_error

    if errors or clean_front is None or clean_back is None:
        raise ValidationFailedError(errors)

    return CardContent(front=clean_front, back=clean_back)
