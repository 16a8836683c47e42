"""Consensus statistics over a round's guesses.

Reduces a snapshot of guesses to count, mean and population standard
deviation, plus the round median. Every function is a pure reduction over
the caller's snapshot; nothing is cached between calls, so a live display
recomputes from the full current snapshot each time.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable

import numpy as np

from hivemind.core.numeric import round_half_up
from hivemind.models.types import ConsensusSummary, Guess, MedianSnapshot

logger = logging.getLogger(__name__)


@dataclass
class MedianStats:
    """Median of guess values and the number of guesses it was taken over.

    Attributes:
        median: Median value, or None when there are no guesses.
        sample_size: Number of guesses.
    """

    median: int | None
    sample_size: int


def summarize(guesses: Iterable[Guess]) -> ConsensusSummary | None:
    """Compute consensus statistics for one round.

    All guesses are weighted equally. The caller is responsible for passing
    only guesses from a single round; values are not re-validated here.

    Args:
        guesses: Guesses for one round.

    Returns:
        ConsensusSummary with count, mean and population standard deviation,
        or None when there are no guesses.
    """
    values = np.array([guess.value for guess in guesses], dtype=float)

    if values.size == 0:
        return None

    mean = float(np.mean(values))
    # Population formula (ddof=0): divide by count, not count - 1
    std_dev = float(np.std(values, ddof=0))

    logger.debug(f"Summarized {values.size} guesses: mean={mean:.2f}, std_dev={std_dev:.2f}")

    return ConsensusSummary(count=int(values.size), mean=mean, std_dev=std_dev)


def compute_median(guesses: Iterable[Guess]) -> MedianStats:
    """Compute the median guess value.

    With an even number of guesses the two middle values are averaged and
    rounded half up, so the median is always a whole game value.

    Args:
        guesses: Guesses for one round.

    Returns:
        MedianStats (median is None when there are no guesses).
    """
    values = sorted(guess.value for guess in guesses)
    total = len(values)

    if total == 0:
        return MedianStats(median=None, sample_size=0)

    mid = total // 2
    if total % 2 == 1:
        median = round_half_up(values[mid])
    else:
        median = round_half_up((values[mid - 1] + values[mid]) / 2)

    return MedianStats(median=median, sample_size=total)


def build_median_snapshot(
    game_id: str,
    guesses: Iterable[Guess],
    now: datetime | None = None,
) -> MedianSnapshot | None:
    """Build a fresh median snapshot for a round.

    Args:
        game_id: Round the guesses belong to.
        guesses: Guesses for that round.
        now: Calculation timestamp (defaults to current UTC time).

    Returns:
        MedianSnapshot, or None when there are no guesses.
    """
    stats = compute_median(guesses)
    if stats.median is None:
        return None

    return MedianSnapshot(
        game_id=game_id,
        median=stats.median,
        calculated_at=now or datetime.now(timezone.utc),
        sample_size=stats.sample_size,
        freshness="FRESH",
    )
