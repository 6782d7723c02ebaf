"""Shared numeric helpers for the scoring engine."""

from __future__ import annotations

import math


def clamp(value: float, lo: float = 0.0, hi: float = 100.0) -> float:
    """Clamp a value to [lo, hi]. NaN clamps to ``lo``."""
    if math.isnan(value):
        return lo
    return max(lo, min(hi, value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (not banker's rounding)."""
    return int(math.floor(value + 0.5))


def clamp_score(value: float) -> int:
    """Round half up, then clamp into the 0-100 score range.

    NaN maps to 0 and infinities saturate, so the result is always a valid score.
    """
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return 100 if value > 0 else 0
    return int(clamp(round_half_up(value), 0, 100))


def ratio_percent(achieved: float, target: float) -> float:
    """Achievement as a percentage of target, capped at 100.

    A zero (or negative) target is floored to 1 so the division is always defined.
    A NaN achievement counts as no achievement.
    """
    if math.isnan(achieved):
        return 0.0
    return min(100.0, achieved / max(1.0, target) * 100)
