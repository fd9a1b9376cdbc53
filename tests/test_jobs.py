"""Tests for the sample-card seeding job."""

from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from flashstudy.db.operations import card_to_model, count_cards, list_all_cards
from flashstudy.jobs.seed_cards import SAMPLE_CARDS, main, run_seed, seed_cards
from flashstudy.models.card import Difficulty
from flashstudy.services.stats import compute_stats


class TestSeedCards:
    async def test_inserts_every_sample(self, session: AsyncSession) -> None:
        """All sample cards land in the store."""
        inserted = await seed_cards(session)
        await session.commit()

        assert inserted == len(SAMPLE_CARDS)
        assert await count_cards(session) == len(SAMPLE_CARDS)

    async def test_rated_samples_have_history(self, session: AsyncSession) -> None:
        """Seeded ratings are applied as a single study each."""
        await seed_cards(session)
        await session.commit()

        for row in await list_all_cards(session):
            card = card_to_model(row)
            if card.difficulty is Difficulty.NOT_STUDIED:
                assert card.study_count == 0
                assert card.last_studied_at is None
            else:
                assert card.study_count == 1
                assert card.last_studied_at is not None

    async def test_stats_match_samples(self, session: AsyncSession) -> None:
        await seed_cards(session)
        await session.commit()

        stats = await compute_stats(session)

        rated = sum(1 for *_, d in SAMPLE_CARDS if d is not Difficulty.NOT_STUDIED)
        assert stats.total == len(SAMPLE_CARDS)
        assert stats.total_studies == rated
        assert stats.hard == sum(1 for *_, d in SAMPLE_CARDS if d is Difficulty.HARD)

    async def test_custom_cards(self, session: AsyncSession) -> None:
        inserted = await seed_cards(session, [("Q", "A", Difficulty.NOT_STUDIED)])

        assert inserted == 1


class TestRunSeed:
    @pytest.fixture
    def session_factory(self, async_engine):
        return async_sessionmaker(async_engine, class_=AsyncSession, expire_on_commit=False)

    async def test_run_seed(self, session_factory, session: AsyncSession) -> None:
        """Seeding commits the sample deck to the configured database."""
        with (
            patch("flashstudy.jobs.seed_cards.init_db", new=AsyncMock()) as mock_init,
            patch("flashstudy.jobs.seed_cards.async_session_factory", new=session_factory),
        ):
            count = await run_seed()

        mock_init.assert_awaited_once()
        assert count == len(SAMPLE_CARDS)
        assert await count_cards(session) == len(SAMPLE_CARDS)

    async def test_fresh_replaces_existing(self, session_factory, session: AsyncSession) -> None:
        """--fresh removes existing cards before seeding."""
        with (
            patch("flashstudy.jobs.seed_cards.init_db", new=AsyncMock()),
            patch("flashstudy.jobs.seed_cards.async_session_factory", new=session_factory),
        ):
            await run_seed()
            await run_seed(fresh=True)

        assert await count_cards(session) == len(SAMPLE_CARDS)

    async def test_without_fresh_appends(self, session_factory, session: AsyncSession) -> None:
        with (
            patch("flashstudy.jobs.seed_cards.init_db", new=AsyncMock()),
            patch("flashstudy.jobs.seed_cards.async_session_factory", new=session_factory),
        ):
            await run_seed()
            await run_seed()

        assert await count_cards(session) == 2 * len(SAMPLE_CARDS)


class TestMain:
    def test_main_passes_fresh_flag(self) -> None:
        """CLI flag is forwarded to run_seed."""
        with (
            patch("sys.argv", ["flashstudy-seed", "--fresh"]),
            patch("flashstudy.jobs.seed_cards.run_seed", new=AsyncMock(return_value=0)) as mock_run,
        ):
            main()

        mock_run.assert_awaited_once_with(fresh=True)
