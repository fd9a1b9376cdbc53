"""Tests for study statistics."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from flashstudy.models.card import Difficulty
from flashstudy.services.stats import StudyStats, average_studies, compute_stats
from tests.conftest import T1, T2, SeedCard


class TestAverageStudies:
    @pytest.mark.parametrize(
        ("total_studies", "total", "expected"),
        [
            (0, 0, 0.0),
            (0, 3, 0.0),
            (1, 1, 1.0),
            (1, 4, 0.3),
            (1, 3, 0.3),
            (2, 3, 0.7),
            (9, 4, 2.3),
            (5, 2, 2.5),
        ],
    )
    def test_rounding(self, total_studies: int, total: int, expected: float) -> None:
        """Mean is rounded to one decimal, halves away from zero."""
        assert average_studies(total_studies, total) == expected


class TestComputeStats:
    async def test_empty_store(self, session: AsyncSession) -> None:
        """An empty store reports zeros everywhere."""
        stats = await compute_stats(session)

        assert stats == StudyStats()

    async def test_counts_per_class(self, seed_card: SeedCard, session: AsyncSession) -> None:
        """Class counts add up to the total and study counts are summed."""
        await seed_card()
        await seed_card()
        await seed_card(difficulty=Difficulty.EASY, study_count=3, last_studied_at=T1)
        await seed_card(difficulty=Difficulty.MEDIUM, study_count=1, last_studied_at=T1)
        await seed_card(difficulty=Difficulty.HARD, study_count=2, last_studied_at=T2)

        stats = await compute_stats(session)

        assert stats.total == 5
        assert stats.not_studied == 2
        assert stats.easy == 1
        assert stats.medium == 1
        assert stats.hard == 1
        assert stats.not_studied + stats.easy + stats.medium + stats.hard == stats.total
        assert stats.total_studies == 6
        assert stats.avg_studies_per_card == 1.2

    async def test_to_dict_keys(self, seed_card: SeedCard, session: AsyncSession) -> None:
        await seed_card()

        data = (await compute_stats(session)).to_dict()

        assert set(data) == {
            "total",
            "not_studied",
            "easy",
            "medium",
            "hard",
            "total_studies",
            "avg_studies_per_card",
        }
