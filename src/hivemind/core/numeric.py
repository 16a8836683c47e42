"""Shared numeric helpers.

Used by both the spectrum color mapper and the aggregation layer:
- clamp / clamp01: bound a value to a range
- round_half_up: rounding that matches display conventions (0.5 goes up)
- lerp: scalar linear interpolation
- jitter: bounded random perturbation for marker de-overlap
"""

from __future__ import annotations

import math

import numpy as np


def clamp(value: float, low: float, high: float) -> float:
    """Bound value to [low, high]."""
    return max(low, min(high, value))


def clamp01(value: float) -> float:
    return clamp(value, 0.0, 1.0)


def round_half_up(value: float) -> int:
    """Round to nearest integer, with halves going up.

    Unlike builtin round(), which rounds halves to even (round(0.5) == 0).
    """
    return math.floor(value + 0.5)


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation from a (t=0) to b (t=1).

    t outside [0, 1] extrapolates.
    """
    return a + (b - a) * t


def jitter(value: float, amount: float, rng: np.random.Generator | None = None) -> float:
    """Perturb value by up to amount in either direction.

    The result always lies in the closed interval bounded by value - amount
    and value + amount, whatever the sign of amount. Not deterministic: pass a
    seeded generator to get reproducible output.

    Args:
        value: Value to perturb.
        amount: Maximum displacement.
        rng: Random generator. A fresh one is created per call if omitted.

    Returns:
        Perturbed value.
    """
    if rng is None:
        rng = np.random.default_rng()
    # uniform() draws from [-1, 1); |offset| <= |amount| holds after rounding
    offset = float(rng.uniform(-1.0, 1.0)) * amount
    return value + offset
