"""Tier classification for SCI totals and readiness scores.

Every function here is total over the real numbers: lower bounds are
inclusive and the lowest tier catches everything below the last threshold,
including negative inputs.
"""

from __future__ import annotations

from neuroloop.domains.cognition.domain_logic.readiness_models import (
    READINESS_HIGH_THRESHOLD,
    READINESS_MEDIUM_THRESHOLD,
    ReadinessClassification,
)
from neuroloop.domains.cognition.domain_logic.score_models import (
    SCI_FLOOR_TIER,
    SCI_TIERS,
    SCILevel,
)


def _sci_tier(total: float) -> tuple[SCILevel, str]:
    for lower_bound, level, status_text in SCI_TIERS:
        if total >= lower_bound:
            return level, status_text
    return SCI_FLOOR_TIER


def get_sci_status_text(total: float) -> str:
    """Human-readable status line for an SCI total."""
    return _sci_tier(total)[1]


def get_sci_level(total: float) -> SCILevel:
    """Level tag for an SCI total: elite, high, moderate, developing or early."""
    return _sci_tier(total)[0]


def classify_readiness(score: float) -> ReadinessClassification:
    if score >= READINESS_HIGH_THRESHOLD:
        return ReadinessClassification.HIGH
    if score >= READINESS_MEDIUM_THRESHOLD:
        return ReadinessClassification.MEDIUM
    return ReadinessClassification.LOW
