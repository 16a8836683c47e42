"""Shared pytest fixtures for hivemind tests."""

from datetime import datetime, timezone

import pytest

from hivemind.models.types import Guess, Round


@pytest.fixture
def make_guess():
    """Factory for guesses in a single test round."""

    def _make_guess(value, user_id="user1", game_id="game-1", source="IN_APP"):
        return Guess(
            guess_id=f"guess-{user_id}-{value}",
            game_id=game_id,
            user_id=user_id,
            username=f"User {user_id}",
            value=value,
            created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
            source=source,
        )

    return _make_guess


@pytest.fixture
def make_guesses(make_guess):
    """Build one guess per value, each from a distinct user."""

    def _make_guesses(values, game_id="game-1"):
        return [
            make_guess(value, user_id=f"user{i}", game_id=game_id)
            for i, value in enumerate(values, start=1)
        ]

    return _make_guesses


@pytest.fixture
def game_round():
    """Round context for game-1."""
    return Round(
        game_id="game-1",
        left_label="Flop",
        right_label="Blockbuster",
        target_value=50,
        host_user_id="host1",
        host_username="Host",
    )
