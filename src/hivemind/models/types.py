"""Pydantic models for the hivemind core.

These are the records that cross the core boundary: guesses coming in from
ingestion, round context, and the summaries handed to the renderer/scorer.
Range validation happens here, at construction time; the aggregation layer
never re-validates.
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

# Game range for guess values and targets
MIN_GUESS_VALUE = 0
MAX_GUESS_VALUE = 100

GuessSource = Literal["REDDIT_COMMENT", "IN_APP", "UNKNOWN"]
MedianFreshness = Literal["STALE", "FRESH"]
ClueClarityRating = Literal["EXCELLENT", "STRONG", "FAIR", "NEEDS_WORK"]
AccoladeType = Literal["PSYCHIC", "TOP_COMMENT", "UNPOPULAR_OPINION"]
ConsensusLabelType = Literal[
    "PERFECT_HIVEMIND",
    "ECHO_CHAMBER",
    "BATTLE_ROYALE",
    "TOTAL_ANARCHY",
    "DUMPSTER_FIRE",
    "INSUFFICIENT_DATA",
]


class Guess(BaseModel):
    """One participant's submission for a round.

    Immutable once created. Identity is guess_id (unique per round).
    """

    model_config = ConfigDict(frozen=True)

    guess_id: str
    game_id: str
    user_id: str
    username: str
    value: float = Field(ge=MIN_GUESS_VALUE, le=MAX_GUESS_VALUE)
    created_at: datetime
    source: GuessSource
    justification: str | None = None


class Round(BaseModel):
    """Read-only round context owned by the surrounding game."""

    model_config = ConfigDict(frozen=True)

    game_id: str
    left_label: str
    right_label: str
    target_value: int = Field(ge=MIN_GUESS_VALUE, le=MAX_GUESS_VALUE)
    host_user_id: str
    host_username: str


class ConsensusSummary(BaseModel):
    """Population statistics over the guess values of one round."""

    count: int = Field(gt=0)
    mean: float
    std_dev: float = Field(ge=0)


class MedianSnapshot(BaseModel):
    """Median of a round's guesses at a point in time."""

    game_id: str
    median: int
    calculated_at: datetime
    sample_size: int
    freshness: MedianFreshness


class ScoreBreakdown(BaseModel):
    """Per-participant score components."""

    guessing_score: float
    persuasion_score: float
    total_score: float


class PlayerScoreSummary(BaseModel):
    """Score card for one guesser."""

    user_id: str
    username: str
    guess_value: float
    guess_rank: int
    breakdown: ScoreBreakdown
    accolades: list[AccoladeType] = Field(default_factory=list)


class HostScoreSummary(BaseModel):
    """Score card for the round's host (the clue giver)."""

    host_user_id: str
    host_username: str
    breakdown: ScoreBreakdown
    participant_count: int
    clue_clarity_rating: ClueClarityRating | None


class ScoreHistogramBucket(BaseModel):
    """Inclusive value range and how many guesses fell in it."""

    range_start: int
    range_end: int
    count: int


class AccoladeSummary(BaseModel):
    """user_id of each accolade winner, if any."""

    best_accuracy: str | None = None
    top_persuasion: str | None = None
    most_contrarian: str | None = None


class ScoreSummary(BaseModel):
    """Resolved scores for a round."""

    host: HostScoreSummary
    players: list[PlayerScoreSummary]
    target_value: int
    final_median: int | None
    histogram: list[ScoreHistogramBucket]
    accolades: AccoladeSummary


class SimulateGuessesRequest(BaseModel):
    """Parameters for the developer guess simulator."""

    count: int = Field(default=100, ge=1, le=5000)
    std_dev: float = Field(default=15.0, ge=1, le=50)
