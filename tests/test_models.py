"""Tests for the card domain model."""

from dataclasses import FrozenInstanceError, fields

import pytest

from flashstudy.models.card import Card, Difficulty, parse_difficulty
from flashstudy.models.envelope import CardResponse
from tests.conftest import T0


class TestCard:
    def test_fields_match_wire_model(self) -> None:
        """The domain card carries exactly the fields the API returns."""
        assert [f.name for f in fields(Card)] == list(CardResponse.model_fields)

    def test_frozen(self) -> None:
        card = Card(
            id=1,
            front="Q",
            back="A",
            difficulty=Difficulty.NOT_STUDIED,
            study_count=0,
            last_studied_at=None,
            created_at=T0,
            updated_at=T0,
        )

        with pytest.raises(FrozenInstanceError):
            card.study_count = 1  # type: ignore[misc]


class TestParseDifficulty:
    @pytest.mark.parametrize("value", ["not_studied", "easy", "medium", "hard"])
    def test_known_values(self, value: str) -> None:
        assert parse_difficulty(value) is Difficulty(value)

    @pytest.mark.parametrize("value", ["", "Hard", "expert"])
    def test_unknown_values(self, value: str) -> None:
        assert parse_difficulty(value) is None
