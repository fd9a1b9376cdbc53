"""
FlashStudy services.

Business logic for card validation, review ordering, ratings and
statistics. Everything here works on domain cards and raises typed
errors; HTTP concerns stay in flashstudy.api.
"""

from flashstudy.services.card_content import CardContent, validate_card_content
from flashstudy.services.pagination import Page, PageRequest, paginate, validate_paging
from flashstudy.services.rating import apply_difficulty, rate_card, reset_card
from flashstudy.services.stats import StudyStats, average_studies, compute_stats
from flashstudy.services.study_order import (
    CLASS_RANK,
    list_for_study,
    order_for_study,
    study_priority,
)

__all__ = [
    # Card content
    "CardContent",
    "validate_card_content",
    # Pagination
    "Page",
    "PageRequest",
    "paginate",
    "validate_paging",
    # Ratings
    "apply_difficulty",
    "rate_card",
    "reset_card",
    # Statistics
    "StudyStats",
    "average_studies",
    "compute_stats",
    # Review order
    "CLASS_RANK",
    "list_for_study",
    "order_for_study",
    "study_priority",
]
