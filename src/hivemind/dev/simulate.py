"""Guess simulator for development and calibration.

Generates synthetic rounds: values drawn from a normal distribution around a
target, rounded to whole game values and clamped to the game range. Used to
check the consensus thresholds and to seed local rounds with traffic.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

import numpy as np

from hivemind.core.numeric import clamp, round_half_up
from hivemind.models.types import (
    MAX_GUESS_VALUE,
    MIN_GUESS_VALUE,
    Guess,
    GuessSource,
    SimulateGuessesRequest,
)


def sample_guess_value(target: float, std_dev: float, rng: np.random.Generator) -> int:
    """Draw one guess value around target.

    Args:
        target: Center of the distribution.
        std_dev: Intended spread.
        rng: Random generator.

    Returns:
        Whole value in [MIN_GUESS_VALUE, MAX_GUESS_VALUE].
    """
    value = round_half_up(float(rng.normal(target, std_dev)))
    return int(clamp(value, MIN_GUESS_VALUE, MAX_GUESS_VALUE))


def simulate_guesses(
    game_id: str,
    target: float,
    count: int = 100,
    std_dev: float = 15.0,
    seed: int | None = None,
    source: GuessSource = "IN_APP",
) -> list[Guess]:
    """Generate a synthetic set of guesses for one round.

    Args:
        game_id: Round to attach the guesses to.
        target: Value the crowd is centered on.
        count: Number of guesses (1-5000).
        std_dev: Intended spread (1-50).
        seed: Seed for reproducible values (ids are always unique).
        source: Provenance tag for every generated guess.

    Returns:
        List of Guess records, one per simulated user.

    Raises:
        pydantic.ValidationError: If count or std_dev is out of range.
    """
    request = SimulateGuessesRequest(count=count, std_dev=std_dev)
    rng = np.random.default_rng(seed)
    created_at = datetime.now(timezone.utc)

    guesses = []
    for i in range(request.count):
        guesses.append(
            Guess(
                guess_id=f"dev_{uuid.uuid4().hex}",
                game_id=game_id,
                user_id=f"dev_user_{i}",
                username=f"dev{i}",
                value=sample_guess_value(target, request.std_dev, rng),
                created_at=created_at,
                source=source,
            )
        )
    return guesses
