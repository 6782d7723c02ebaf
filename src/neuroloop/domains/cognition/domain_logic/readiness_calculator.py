"""Daily cognitive readiness: wearable biomarkers + cognitive scores.

Absent biomarkers are left out of the physio blend and the remaining weights
are renormalized; they are never replaced with neutral values.
"""

from __future__ import annotations

import logging

from neuroloop.domains.cognition.domain_logic.classification import classify_readiness
from neuroloop.domains.cognition.domain_logic.numeric import clamp, clamp_score
from neuroloop.domains.cognition.domain_logic.readiness_models import (
    COGNITIVE_READINESS_WEIGHTS,
    HRV_CEILING_MS,
    HRV_FLOOR_MS,
    PHYSIO_WEIGHTS,
    READINESS_WEIGHTS,
    RESTING_HR_BEST_BPM,
    RESTING_HR_WORST_BPM,
    SLEEP_EFFICIENCY_CEILING_PCT,
    SLEEP_EFFICIENCY_FLOOR_PCT,
    SLEEP_OPTIMAL_MIN,
    SLEEP_TOLERANCE_MIN,
    CognitiveReadinessInput,
    ReadinessResult,
    WearableSnapshot,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Biomarker signals (each in [0, 1])
# ---------------------------------------------------------------------------

def hrv_signal(hrv_ms: float) -> float:
    """Higher HRV = better autonomic recovery."""
    return clamp((hrv_ms - HRV_FLOOR_MS) / (HRV_CEILING_MS - HRV_FLOOR_MS), 0.0, 1.0)


def resting_hr_signal(resting_hr: float) -> float:
    """Lower resting heart rate = better recovered."""
    span = RESTING_HR_WORST_BPM - RESTING_HR_BEST_BPM
    return clamp(1.0 - (resting_hr - RESTING_HR_BEST_BPM) / span, 0.0, 1.0)


def sleep_duration_signal(minutes: float) -> float:
    """Distance from 8h optimal; oversleeping is penalized like undersleeping."""
    return clamp(1.0 - abs(minutes - SLEEP_OPTIMAL_MIN) / SLEEP_TOLERANCE_MIN, 0.0, 1.0)


def sleep_efficiency_signal(efficiency: float) -> float:
    """Sleep efficiency in percent; values <= 1 are read as fractions."""
    pct = efficiency * 100 if efficiency <= 1 else efficiency
    span = SLEEP_EFFICIENCY_CEILING_PCT - SLEEP_EFFICIENCY_FLOOR_PCT
    return clamp((pct - SLEEP_EFFICIENCY_FLOOR_PCT) / span, 0.0, 1.0)


_SIGNAL_FUNCS = {
    "hrv_ms": hrv_signal,
    "resting_hr": resting_hr_signal,
    "sleep_duration_min": sleep_duration_signal,
    "sleep_efficiency": sleep_efficiency_signal,
}


# ---------------------------------------------------------------------------
# Components
# ---------------------------------------------------------------------------

def compute_physio_component(snapshot: WearableSnapshot | None) -> tuple[int | None, dict]:
    """Blend whatever biomarkers are present into a 0-100 physio score.

    Returns:
        (score or None when no biomarker is present, details dict)
    """
    if snapshot is None:
        return None, {"fallback": "no_wearable_snapshot"}

    present = snapshot.present_fields()
    if not present:
        return None, {"fallback": "no_biomarkers_reported"}

    details: dict = {"biomarkers_used": present}
    weighted: list[tuple[float, float]] = []  # (weight, signal)
    for name in present:
        signal = _SIGNAL_FUNCS[name](getattr(snapshot, name))
        weighted.append((PHYSIO_WEIGHTS[name], signal))
        details[f"{name}_signal"] = round(signal, 4)

    total_weight = sum(w for w, _ in weighted)
    blended = sum(w * s for w, s in weighted) / total_weight
    if len(present) < len(_SIGNAL_FUNCS):
        details["partial"] = True

    return clamp_score(100 * blended), details


def compute_cognitive_component(cognitive: CognitiveReadinessInput) -> int:
    """Weighted blend of reasoning, focus, working memory and fast/slow thinking."""
    score = sum(
        weight * getattr(cognitive, name)
        for name, weight in COGNITIVE_READINESS_WEIGHTS.items()
    )
    return clamp_score(score)


def compute_cognitive_readiness(physio_score: int | None, cognitive_score: int) -> int:
    """Combine components; cognitive alone when physio data is absent."""
    if physio_score is None:
        return clamp_score(cognitive_score)
    return clamp_score(
        READINESS_WEIGHTS["physio"] * physio_score
        + READINESS_WEIGHTS["cognitive"] * cognitive_score
    )


# ---------------------------------------------------------------------------
# Orchestrator
# ---------------------------------------------------------------------------

def compute_readiness(
    physio_input: WearableSnapshot | None,
    cognitive_input: CognitiveReadinessInput,
) -> ReadinessResult:
    """Compute today's readiness score and its LOW / MEDIUM / HIGH tier."""
    physio_score, physio_details = compute_physio_component(physio_input)
    cognitive_score = compute_cognitive_component(cognitive_input)
    readiness_score = compute_cognitive_readiness(physio_score, cognitive_score)

    if physio_score is None:
        logger.debug("No wearable biomarkers present; readiness is cognitive-only")

    return ReadinessResult(
        physio_score=physio_score,
        cognitive_score=cognitive_score,
        readiness_score=readiness_score,
        classification=classify_readiness(readiness_score),
        biomarkers_used=physio_details.get("biomarkers_used", []),
        details={"physio": physio_details},
    )
