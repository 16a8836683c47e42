"""Guess marker placement along the spectrum.

A marker is drawn at its guess value, nudged by jitter so markers that share
a value do not overlap, and colored by where the value sits between the two
end colors. Jitter is visual only; the color and any scoring use the
unjittered value.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from hivemind.core.numeric import clamp, clamp01, jitter
from hivemind.models.types import MAX_GUESS_VALUE, MIN_GUESS_VALUE
from hivemind.spectrum.colors import lerp_color

# Default marker scatter, in guess-value units
DEFAULT_JITTER_AMOUNT = 1.5


@dataclass(frozen=True)
class MarkerPlacement:
    """Where and how to draw one guess marker.

    Attributes:
        value: Underlying guess value.
        position: Jittered display position, within the game range.
        color: Packed RGB color for the underlying value.
    """

    value: float
    position: float
    color: int


def value_to_t(value: float) -> float:
    """Fraction of the way from the left end to the right end, in [0, 1]."""
    span = MAX_GUESS_VALUE - MIN_GUESS_VALUE
    return clamp01((value - MIN_GUESS_VALUE) / span)


def marker_color(colors: tuple[int, int], value: float) -> int:
    """Color for a guess value, interpolated between the end colors."""
    left, right = colors
    return lerp_color(left, right, value_to_t(value))


def place_marker(
    colors: tuple[int, int],
    value: float,
    amount: float = DEFAULT_JITTER_AMOUNT,
    rng: np.random.Generator | None = None,
) -> MarkerPlacement:
    """Compute the display placement for one guess.

    Args:
        colors: (left, right) end colors from get_spectrum_colors.
        value: Guess value.
        amount: Maximum jitter displacement.
        rng: Random generator for jitter.

    Returns:
        MarkerPlacement with position clamped back into the game range.
    """
    position = float(clamp(jitter(value, amount, rng), MIN_GUESS_VALUE, MAX_GUESS_VALUE))
    return MarkerPlacement(value=value, position=position, color=marker_color(colors, value))
