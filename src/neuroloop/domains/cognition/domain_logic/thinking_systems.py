"""Fast (System 1) and slow (System 2) thinking system scores.

Each system score is the plain average of the snapshot metrics that map to
it. Metrics that are None or NaN are left out of the average; with no
usable metric a system scores a neutral 50.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, field

from neuroloop.domains.cognition.domain_logic.cognitive_profile import CognitiveMetricsSnapshot
from neuroloop.domains.cognition.domain_logic.numeric import clamp, round_half_up

NEUTRAL_SYSTEM_SCORE = 50

# Reaction time mapped linearly: 200 ms -> 100, 500 ms -> 0
REACTION_BEST_MS = 200
REACTION_MS_PER_POINT = 3

SYSTEM_LEVELS = [
    (85, "elite"),
    (70, "high"),
    (50, "moderate"),
]


@dataclass
class ThinkingSystemScore:
    score: int
    delta: float
    level: str  # low | moderate | high | elite
    metrics_used: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class ThinkingSystemsResult:
    fast: ThinkingSystemScore
    slow: ThinkingSystemScore

    def to_dict(self) -> dict:
        return {"fast": self.fast.to_dict(), "slow": self.slow.to_dict()}


def _usable(value: float | None) -> bool:
    return value is not None and not math.isnan(value)


def _average(metrics: list[tuple[str, float]]) -> tuple[int, list[str]]:
    if not metrics:
        return NEUTRAL_SYSTEM_SCORE, []
    mean = sum(value for _, value in metrics) / len(metrics)
    return round_half_up(clamp(mean, 0, 100)), [name for name, _ in metrics]


def reaction_speed_score(reaction_time_ms: float) -> float:
    return clamp(100 - (reaction_time_ms - REACTION_BEST_MS) / REACTION_MS_PER_POINT, 0, 100)


def compute_fast_system_score(snapshot: CognitiveMetricsSnapshot) -> tuple[int, list[str]]:
    """Intuitive, rapid, pattern-based thinking."""
    metrics: list[tuple[str, float]] = []
    if _usable(snapshot.fast_thinking_score_raw):
        metrics.append(("fast_thinking_score", snapshot.fast_thinking_score_raw))
    if _usable(snapshot.reaction_time_avg_ms):
        metrics.append(("reaction_speed", reaction_speed_score(snapshot.reaction_time_avg_ms)))
    if _usable(snapshot.focus_stability_raw):
        metrics.append(("visual_processing_speed", snapshot.focus_stability_raw * 0.7))
    if _usable(snapshot.creativity_raw):
        metrics.append(("creative_fluency_fast", snapshot.creativity_raw * 0.5))
    return _average(metrics)


def compute_slow_system_score(snapshot: CognitiveMetricsSnapshot) -> tuple[int, list[str]]:
    """Deliberate, rule-based, analytic thinking."""
    metrics: list[tuple[str, float]] = []
    if _usable(snapshot.slow_thinking_score_raw):
        metrics.append(("slow_thinking_score", snapshot.slow_thinking_score_raw))
    if _usable(snapshot.reasoning_accuracy):
        metrics.append(("reasoning_strength", snapshot.reasoning_accuracy * 100))
    if _usable(snapshot.clarity_score_raw):
        metrics.append(("clarity_score", snapshot.clarity_score_raw))
    if _usable(snapshot.decision_quality_raw):
        metrics.append(("executive_control", snapshot.decision_quality_raw))
    if _usable(snapshot.philosophical_depth_raw):
        metrics.append(("cognitive_flexibility", snapshot.philosophical_depth_raw * 0.8))
    if _usable(snapshot.focus_stability_raw):
        metrics.append(("attention_stability", snapshot.focus_stability_raw * 0.6))
    return _average(metrics)


def get_system_level(score: float) -> str:
    for bound, level in SYSTEM_LEVELS:
        if score >= bound:
            return level
    return "low"


def compute_fast_slow_systems(
    snapshot: CognitiveMetricsSnapshot,
    previous: CognitiveMetricsSnapshot | None = None,
) -> ThinkingSystemsResult:
    """Score both thinking systems, with deltas against an optional previous snapshot."""
    fast_score, fast_used = compute_fast_system_score(snapshot)
    slow_score, slow_used = compute_slow_system_score(snapshot)

    fast_delta = 0.0
    slow_delta = 0.0
    if previous is not None:
        fast_delta = float(fast_score - compute_fast_system_score(previous)[0])
        slow_delta = float(slow_score - compute_slow_system_score(previous)[0])

    return ThinkingSystemsResult(
        fast=ThinkingSystemScore(
            score=fast_score,
            delta=fast_delta,
            level=get_system_level(fast_score),
            metrics_used=fast_used,
        ),
        slow=ThinkingSystemScore(
            score=slow_score,
            delta=slow_delta,
            level=get_system_level(slow_score),
            metrics_used=slow_used,
        ),
    )
