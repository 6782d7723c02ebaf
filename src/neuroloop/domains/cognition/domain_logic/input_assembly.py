"""Build calculator inputs from raw stored rows.

This is the calling layer's responsibility: defaults are passed in
explicitly so the calculators themselves never see a missing value.
"""

from __future__ import annotations

import math
from typing import Any, Mapping

from neuroloop.domains.cognition.domain_logic.cognitive_profile import (
    CognitiveBaseline,
    CognitiveMetricsSnapshot,
)
from neuroloop.domains.cognition.domain_logic.plan_targets import PlanTargets
from neuroloop.domains.cognition.domain_logic.readiness_models import (
    BIOMARKER_NAMES,
    CognitiveReadinessInput,
    WearableSnapshot,
)
from neuroloop.domains.cognition.domain_logic.score_models import (
    BehavioralEngagementInput,
    CognitiveMetricsInput,
    RecoveryInput,
)


def _num(val: Any, default: float | None) -> float | None:
    """Convert to float; None, non-numeric and NaN values give ``default``."""
    if val is None or isinstance(val, bool):
        return default
    try:
        result = float(val)
    except (TypeError, ValueError):
        return default
    if math.isnan(result):
        return default
    return result


def build_cognitive_metrics_input(
    row: Mapping[str, Any] | None, default: float
) -> CognitiveMetricsInput:
    row = row or {}
    return CognitiveMetricsInput(
        reasoning_accuracy=_num(row.get("reasoning_accuracy"), default),
        focus_stability=_num(row.get("focus_stability"), default),
        decision_quality=_num(row.get("decision_quality"), default),
        creativity=_num(row.get("creativity"), default),
        fast_thinking=_num(row.get("fast_thinking"), default),
        slow_thinking=_num(row.get("slow_thinking"), default),
    )


def build_behavioral_input(
    progress: Mapping[str, Any] | None, targets: PlanTargets
) -> BehavioralEngagementInput:
    """Weekly progress vs plan targets; task XP is the weekly content XP."""
    progress = progress or {}
    return BehavioralEngagementInput(
        weekly_games_xp=_num(progress.get("weekly_games_xp"), 0.0),
        games_target=targets.games_xp,
        weekly_tasks_xp=_num(progress.get("weekly_content_xp"), 0.0),
        tasks_target=targets.tasks_xp,
        sessions_completed=_num(progress.get("sessions_completed"), 0.0),
        sessions_required=targets.sessions_required,
    )


def build_recovery_input(
    detox: Mapping[str, Any] | None, targets: PlanTargets
) -> RecoveryInput:
    detox = detox or {}
    return RecoveryInput(
        weekly_detox_minutes=_num(detox.get("total_minutes"), 0.0),
        detox_target=targets.detox_minutes,
    )


def build_readiness_input(
    row: Mapping[str, Any] | None, default: float
) -> CognitiveReadinessInput:
    """Readiness inputs; visual processing stands in for working memory."""
    row = row or {}
    return CognitiveReadinessInput(
        reasoning_accuracy=_num(row.get("reasoning_accuracy"), default),
        focus_index=_num(row.get("focus_stability"), default),
        working_memory_score=_num(row.get("visual_processing"), default),
        fast_thinking_score=_num(row.get("fast_thinking"), default),
        slow_thinking_score=_num(row.get("slow_thinking"), default),
    )


def build_wearable_snapshot(row: Mapping[str, Any] | None) -> WearableSnapshot | None:
    """A device reading of zero or less counts as not reported."""
    if row is None:
        return None
    values: dict[str, float | None] = {}
    for name in BIOMARKER_NAMES:
        value = _num(row.get(name), None)
        values[name] = value if value is not None and value > 0 else None
    return WearableSnapshot(**values)


def build_metrics_snapshot(row: Mapping[str, Any]) -> CognitiveMetricsSnapshot:
    return CognitiveMetricsSnapshot(
        reaction_time_avg_ms=_num(row.get("reaction_time_avg_ms"), 0.0),
        reasoning_accuracy=_num(row.get("reasoning_accuracy"), 0.0),
        clarity_score_raw=_num(row.get("clarity_score_raw"), 0.0),
        decision_quality_raw=_num(row.get("decision_quality_raw"), 0.0),
        creativity_raw=_num(row.get("creativity_raw"), 0.0),
        focus_stability_raw=_num(row.get("focus_stability_raw"), 0.0),
        philosophical_depth_raw=_num(row.get("philosophical_depth_raw"), 0.0),
        fast_thinking_score_raw=_num(row.get("fast_thinking_score_raw"), 0.0),
        slow_thinking_score_raw=_num(row.get("slow_thinking_score_raw"), 0.0),
        sessions_completed=int(_num(row.get("sessions_completed"), 0.0)),
    )


def build_baseline(row: Mapping[str, Any]) -> CognitiveBaseline:
    return CognitiveBaseline(
        reaction_time_baseline_ms=_num(row.get("reaction_time_baseline_ms"), 0.0),
        reasoning_accuracy_baseline=_num(row.get("reasoning_accuracy_baseline"), 0.0),
        clarity_baseline=_num(row.get("clarity_baseline"), 0.0),
        decision_quality_baseline=_num(row.get("decision_quality_baseline"), 0.0),
        creativity_baseline=_num(row.get("creativity_baseline"), 0.0),
        focus_stability_baseline=_num(row.get("focus_stability_baseline"), 0.0),
        fast_thinking_baseline=_num(row.get("fast_thinking_baseline"), 0.0),
        slow_thinking_baseline=_num(row.get("slow_thinking_baseline"), 0.0),
        brain_age_baseline=_num(row.get("brain_age_baseline"), None),
    )
