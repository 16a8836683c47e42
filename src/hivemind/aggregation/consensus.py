"""Consensus label derivation from guess dispersion.

Labels, by population standard deviation of the round's guesses:
- PERFECT_HIVEMIND: <= 2
- ECHO_CHAMBER: <= 5
- BATTLE_ROYALE: <= 8
- TOTAL_ANARCHY: <= 12
- DUMPSTER_FIRE: above 12
- INSUFFICIENT_DATA: fewer than two guesses

Thresholds are empirically tuned; the standard deviation is logged so they
can be recalibrated against real rounds.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from hivemind.aggregation.summary import summarize
from hivemind.models.types import ConsensusLabelType, ConsensusSummary, Guess

logger = logging.getLogger(__name__)

# Upper bounds (inclusive) on standard deviation for each label
PERFECT_HIVEMIND_CEILING = 2.0
ECHO_CHAMBER_CEILING = 5.0
BATTLE_ROYALE_CEILING = 8.0
TOTAL_ANARCHY_CEILING = 12.0

NO_GUESSES_DESCRIPTION = "No guesses submitted yet"
SINGLE_GUESS_DESCRIPTION = "Only one guess submitted - need more data"
NOT_ENOUGH_GUESSES_TEXT = "Not enough guesses yet"


@dataclass
class ConsensusLabel:
    """Named consensus level for a round.

    Attributes:
        label: Consensus label type.
        standard_deviation: Dispersion the label was derived from.
        description: Human-readable flavor text.
    """

    label: ConsensusLabelType
    standard_deviation: float
    description: str


def classify_consensus(standard_deviation: float) -> ConsensusLabel:
    """Map a standard deviation to a consensus label.

    Args:
        standard_deviation: Population standard deviation of guess values.

    Returns:
        ConsensusLabel for that dispersion.
    """
    if standard_deviation <= PERFECT_HIVEMIND_CEILING:
        label: ConsensusLabelType = "PERFECT_HIVEMIND"
        description = "The collective mind speaks as one"
    elif standard_deviation <= ECHO_CHAMBER_CEILING:
        label = "ECHO_CHAMBER"
        description = "Most minds think alike"
    elif standard_deviation <= BATTLE_ROYALE_CEILING:
        label = "BATTLE_ROYALE"
        description = "The community is at war"
    elif standard_deviation <= TOTAL_ANARCHY_CEILING:
        label = "TOTAL_ANARCHY"
        description = "Chaos reigns supreme"
    else:
        label = "DUMPSTER_FIRE"
        description = "Complete pandemonium"

    return ConsensusLabel(
        label=label,
        standard_deviation=standard_deviation,
        description=description,
    )


def consensus_from_guesses(guesses: Iterable[Guess]) -> ConsensusLabel:
    """Derive the consensus label for a round's guesses.

    Args:
        guesses: Guesses for one round.

    Returns:
        ConsensusLabel; INSUFFICIENT_DATA when fewer than two guesses.
    """
    summary = summarize(guesses)

    if summary is None:
        return ConsensusLabel(
            label="INSUFFICIENT_DATA",
            standard_deviation=0.0,
            description=NO_GUESSES_DESCRIPTION,
        )

    if summary.count == 1:
        return ConsensusLabel(
            label="INSUFFICIENT_DATA",
            standard_deviation=0.0,
            description=SINGLE_GUESS_DESCRIPTION,
        )

    logger.info(
        f"Game standard deviation: {summary.std_dev:.2f} ({summary.count} total guesses)"
    )
    return classify_consensus(summary.std_dev)


def render_summary_text(summary: ConsensusSummary | None) -> str:
    """Render a summary as feedback text.

    A missing summary renders as an explicit "not enough guesses" state
    rather than a zero mean.
    """
    if summary is None:
        return NOT_ENOUGH_GUESSES_TEXT
    noun = "guess" if summary.count == 1 else "guesses"
    return f"Average {summary.mean:.1f} (spread {summary.std_dev:.1f}) from {summary.count} {noun}"
