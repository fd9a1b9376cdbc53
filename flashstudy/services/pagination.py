"""Page-number pagination for card listings."""

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from flashstudy.config import DEFAULT_PER_PAGE, MAX_PER_PAGE
from flashstudy.models.errors import BadRequestError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class PageRequest:
    """A validated page number and page size."""

    page: int = 1
    per_page: int = DEFAULT_PER_PAGE

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.per_page


@dataclass(frozen=True, slots=True)
class Page(Generic[T]):
    """One page of results plus the totals needed to navigate."""

    items: list[T]
    total: int
    page: int
    per_page: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.per_page) if self.total else 0


def validate_paging(page: int | None, per_page: int | None) -> PageRequest:
    """
    Build a PageRequest from raw query values.

    Missing values fall back to page 1 and DEFAULT_PER_PAGE.

    Raises:
        BadRequestError: page < 1 or per_page outside 1..MAX_PER_PAGE
    """
    page = 1 if page is None else page
    per_page = DEFAULT_PER_PAGE if per_page is None else per_page

    if page < 1:
        raise BadRequestError("Page must be greater than 0", errors={"page": "Must be >= 1"})
    if per_page < 1 or per_page > MAX_PER_PAGE:
        raise BadRequestError(
            f"Per page must be between 1 and {MAX_PER_PAGE}",
            errors={"per_page": f"Must be between 1 and {MAX_PER_PAGE}"},
        )
    return PageRequest(page=page, per_page=per_page)


def paginate(items: Sequence[T], request: PageRequest) -> Page[T]:
    """Slice an already-ordered, fully loaded sequence."""
    start = request.offset
    return Page(
        items=list(items[start : start + request.per_page]),
        total=len(items),
        page=request.page,
        per_page=request.per_page,
    )
