"""Round resolution scoring.

Turns a closed round's guesses into score cards:
- guessing score: 100 minus distance to the target, floored at 0
- persuasion score: upvotes on the guess's comment times a multiplier
- host score: how close the crowd median landed to the target
- histogram and accolades for the results view

Upvote counts come from outside the core; pass them in keyed by guess_id.
"""

from __future__ import annotations

import math
from typing import Mapping, Sequence

from hivemind.aggregation.summary import compute_median
from hivemind.core.numeric import clamp
from hivemind.models.types import (
    MAX_GUESS_VALUE,
    MIN_GUESS_VALUE,
    AccoladeSummary,
    ClueClarityRating,
    Guess,
    HostScoreSummary,
    PlayerScoreSummary,
    Round,
    ScoreBreakdown,
    ScoreHistogramBucket,
    ScoreSummary,
)

DEFAULT_HISTOGRAM_BUCKET_SIZE = 10
DEFAULT_PERSUASION_MULTIPLIER = 1.0

# Clue clarity floors on the host's guessing score
CLARITY_EXCELLENT_FLOOR = 90
CLARITY_STRONG_FLOOR = 70
CLARITY_FAIR_FLOOR = 50


def compute_guessing_score(target: float, guess: float) -> float:
    """Score a guess by closeness to the target, in [0, 100]."""
    return float(clamp(100 - abs(target - guess), 0, 100))


def compute_persuasion_score(
    upvotes: int,
    multiplier: float = DEFAULT_PERSUASION_MULTIPLIER,
) -> float:
    return upvotes * multiplier


def aggregate_histogram(
    guesses: Sequence[Guess],
    bucket_size: int = DEFAULT_HISTOGRAM_BUCKET_SIZE,
) -> list[ScoreHistogramBucket]:
    """Count guesses into contiguous inclusive buckets over the game range.

    Args:
        guesses: Guesses for one round.
        bucket_size: Width of each bucket in game values.

    Returns:
        Buckets in ascending order; the last may be narrower.

    Raises:
        ValueError: If bucket_size is not positive.
    """
    if bucket_size <= 0:
        raise ValueError(f"bucket_size must be positive, got {bucket_size}")

    total_buckets = math.ceil((MAX_GUESS_VALUE - MIN_GUESS_VALUE + 1) / bucket_size)
    buckets = []
    for i in range(total_buckets):
        range_start = MIN_GUESS_VALUE + i * bucket_size
        range_end = min(range_start + bucket_size - 1, MAX_GUESS_VALUE)
        # Fractional values count toward the bucket that contains their floor
        count = sum(1 for g in guesses if range_start <= math.floor(g.value) <= range_end)
        buckets.append(
            ScoreHistogramBucket(range_start=range_start, range_end=range_end, count=count)
        )
    return buckets


def derive_clue_clarity(score: float) -> ClueClarityRating:
    if score >= CLARITY_EXCELLENT_FLOOR:
        return "EXCELLENT"
    if score >= CLARITY_STRONG_FLOOR:
        return "STRONG"
    if score >= CLARITY_FAIR_FLOOR:
        return "FAIR"
    return "NEEDS_WORK"


def build_player_summaries(
    round_: Round,
    guesses: Sequence[Guess],
    upvotes: Mapping[str, int] | None = None,
) -> list[PlayerScoreSummary]:
    """Build score cards for every guesser, ranked by guess value.

    Args:
        round_: Round context (supplies the target).
        guesses: Guesses for the round.
        upvotes: Upvote count per guess_id (missing means 0).

    Returns:
        Player summaries sorted by ascending guess value.
    """
    upvotes = upvotes or {}
    summaries = []

    for rank, guess in enumerate(sorted(guesses, key=lambda g: g.value)):
        guessing_score = compute_guessing_score(round_.target_value, guess.value)
        persuasion_score = compute_persuasion_score(upvotes.get(guess.guess_id, 0))
        summaries.append(
            PlayerScoreSummary(
                user_id=guess.user_id,
                username=guess.username,
                guess_value=guess.value,
                guess_rank=rank,
                breakdown=ScoreBreakdown(
                    guessing_score=guessing_score,
                    persuasion_score=persuasion_score,
                    total_score=guessing_score + persuasion_score,
                ),
            )
        )

    return summaries


def assign_accolades(
    players: list[PlayerScoreSummary],
    final_median: int | None,
) -> AccoladeSummary:
    """Award accolades and record them on the winning player summaries.

    - PSYCHIC: highest guessing score
    - TOP_COMMENT: highest persuasion score, if above zero
    - UNPOPULAR_OPINION: guess farthest from the final median

    Ties go to the lowest-ranked player. Mutates players' accolade lists.

    Args:
        players: Summaries from build_player_summaries.
        final_median: Crowd median for the round.

    Returns:
        AccoladeSummary naming each winner by user_id.
    """
    summary = AccoladeSummary()
    if not players:
        return summary

    # max() keeps the first of equal elements, so ties go to the lower rank
    accuracy_leader = max(players, key=lambda p: p.breakdown.guessing_score)
    accuracy_leader.accolades.append("PSYCHIC")
    summary.best_accuracy = accuracy_leader.user_id

    persuasion_leader = max(players, key=lambda p: p.breakdown.persuasion_score)
    if persuasion_leader.breakdown.persuasion_score > 0:
        persuasion_leader.accolades.append("TOP_COMMENT")
        summary.top_persuasion = persuasion_leader.user_id

    if final_median is not None:
        contrarian = max(players, key=lambda p: abs(p.guess_value - final_median))
        contrarian.accolades.append("UNPOPULAR_OPINION")
        summary.most_contrarian = contrarian.user_id

    return summary


def compute_host_score(
    round_: Round,
    final_median: int | None,
    participants: int,
) -> HostScoreSummary:
    """Score the host on how close the crowd median came to the target.

    Each participant adds one persuasion point. Without a median there is
    nothing to rate, so the guessing score is 0 and clarity is None.
    """
    if final_median is None:
        guessing_score = 0.0
        clarity = None
    else:
        guessing_score = compute_guessing_score(round_.target_value, final_median)
        clarity = derive_clue_clarity(guessing_score)

    return HostScoreSummary(
        host_user_id=round_.host_user_id,
        host_username=round_.host_username,
        breakdown=ScoreBreakdown(
            guessing_score=guessing_score,
            persuasion_score=participants,
            total_score=guessing_score + participants,
        ),
        participant_count=participants,
        clue_clarity_rating=clarity,
    )


def compute_score_summary(
    round_: Round,
    guesses: Sequence[Guess],
    upvotes: Mapping[str, int] | None = None,
) -> ScoreSummary:
    """Resolve a closed round into its score summary.

    Args:
        round_: Round context.
        guesses: Every guess recorded for the round.
        upvotes: Upvote count per guess_id.

    Returns:
        ScoreSummary with player and host cards, histogram and accolades.

    Raises:
        ValueError: If any guess belongs to a different round.
    """
    for guess in guesses:
        if guess.game_id != round_.game_id:
            raise ValueError(
                f"Guess {guess.guess_id} belongs to game {guess.game_id}, not {round_.game_id}"
            )

    final_median = compute_median(guesses).median
    players = build_player_summaries(round_, guesses, upvotes)
    accolades = assign_accolades(players, final_median)

    return ScoreSummary(
        host=compute_host_score(round_, final_median, len(guesses)),
        players=players,
        target_value=round_.target_value,
        final_median=final_median,
        histogram=aggregate_histogram(guesses),
        accolades=accolades,
    )
