# co2calc/core/rounding.py
# -*- coding: utf-8 -*-

"""
Fixed-precision rounding used by every published number.

The value is scaled first and then rounded to an integer with ties away
from zero, so `round_to(x, 2)` follows the same float sequence as
`round(x * 100) / 100`. Python's built-in `round()` rounds half to even
and is not used for results.
"""

from __future__ import annotations

import math

from co2calc.core.types import Number


def round_half_away(value: Number) -> float:
    """
    Round to the nearest integer, ties away from zero. Returns a float.

    NaN and infinities are returned unchanged; callers decide what a
    non-finite result means.
    """
    v = float(value)
    if not math.isfinite(v):
        return v

    a = abs(v)
    whole = math.floor(a)
    # a + 0.5 is itself rounded in float, so test the fraction
    if a - whole >= 0.5:
        whole += 1
    rounded = math.copysign(float(whole), v)
    if rounded == 0:
        return 0.0  # drop the sign of -0.0
    return rounded


def round_to(value: Number, digits: int) -> float:
    """
    Round `value` to `digits` fractional digits (scale, round, unscale).
    """
    scale = 10 ** digits
    return round_half_away(float(value) * scale) / scale


def round2(value: Number) -> float:
    return round_to(value, 2)


def round4(value: Number) -> float:
    return round_to(value, 4)


__all__ = ["round_half_away", "round_to", "round2", "round4"]
