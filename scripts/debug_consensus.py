#!/usr/bin/env python3
"""Check consensus statistics against a simulated round.

Generates 111 guesses normally distributed around 50 with spread 9, then
prints the summary statistics and the consensus label they produce. The
population standard deviation should come out close to the intended spread.

Usage:
    python scripts/debug_consensus.py
    HIVEMIND_DEBUG_SEED=7 python scripts/debug_consensus.py
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from hivemind.aggregation.consensus import (  # noqa: E402
    consensus_from_guesses,
    render_summary_text,
)
from hivemind.aggregation.summary import compute_median, summarize  # noqa: E402
from hivemind.dev.simulate import simulate_guesses  # noqa: E402

# Simulated round
DEBUG_GAME_ID = "test-game"
TARGET = 50
STD_DEV = 9
COUNT = 111


def main():
    seed_env = os.environ.get("HIVEMIND_DEBUG_SEED")
    seed = int(seed_env) if seed_env else None

    guesses = simulate_guesses(
        DEBUG_GAME_ID,
        target=TARGET,
        count=COUNT,
        std_dev=STD_DEV,
        seed=seed,
    )

    print(f"Generated {len(guesses)} guesses")
    print(f"Sample values: {', '.join(str(int(g.value)) for g in guesses[:10])}")

    summary = summarize(guesses)
    if summary is None:
        print(render_summary_text(summary))
        return 1

    print(f"Mean: {summary.mean:.2f}")
    print(f"Calculated std dev: {summary.std_dev:.2f}")
    print(f"Expected std dev: {STD_DEV}")
    print(f"Median: {compute_median(guesses).median}")

    consensus = consensus_from_guesses(guesses)
    print(f"Consensus: {consensus.label} ({consensus.description})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
