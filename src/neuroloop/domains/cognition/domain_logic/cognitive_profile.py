"""Cognitive profile: brain-function scores, cognitive age and insights.

Works on a raw metrics snapshot measured against the user's baseline.
Reasoning accuracy is a 0-1 fraction; every other raw score is 0-100.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass

from neuroloop.domains.cognition.domain_logic.numeric import clamp, round_half_up


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CognitiveMetricsSnapshot:
    reaction_time_avg_ms: float
    reasoning_accuracy: float  # 0-1
    clarity_score_raw: float
    decision_quality_raw: float
    creativity_raw: float
    focus_stability_raw: float
    philosophical_depth_raw: float
    fast_thinking_score_raw: float
    slow_thinking_score_raw: float
    sessions_completed: int = 0


@dataclass(frozen=True)
class CognitiveBaseline:
    reaction_time_baseline_ms: float
    reasoning_accuracy_baseline: float
    clarity_baseline: float
    decision_quality_baseline: float
    creativity_baseline: float
    focus_stability_baseline: float
    fast_thinking_baseline: float
    slow_thinking_baseline: float
    brain_age_baseline: float | None = None


@dataclass
class BrainFunctionScore:
    name: str
    score: int
    trend: str          # up | down | stable
    trend_percent: int
    status: str         # excellent | good | moderate | low

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class BrainAgeIndex:
    brain_age: float
    delta: float

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class CognitiveInsight:
    id: str
    text: str
    type: str  # positive | neutral | suggestion

    def to_dict(self) -> dict:
        return asdict(self)


MAX_INSIGHTS = 5
BRAIN_AGE_MAX_SHIFT_YEARS = 15
TREND_THRESHOLD_PCT = 2


# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------

def normalize(raw: float, baseline: float) -> float:
    """Relative change vs baseline, centred at 0.5 and clamped to [0, 1]."""
    if baseline == 0:
        return 0.5
    return clamp((raw - baseline) / baseline + 0.5, 0.0, 1.0)


def normalize_score(raw: float) -> float:
    return clamp(raw / 100, 0.0, 1.0)


def _round1(value: float) -> float:
    return round_half_up(value * 10) / 10


# ---------------------------------------------------------------------------
# Scores
# ---------------------------------------------------------------------------

def calculate_performance_index(
    snapshot: CognitiveMetricsSnapshot, baseline: CognitiveBaseline
) -> float:
    """Cognitive performance index in [0, 1]; faster reactions score higher."""
    reasoning = normalize(snapshot.reasoning_accuracy, baseline.reasoning_accuracy_baseline)
    clarity = normalize_score(snapshot.clarity_score_raw)
    decision = normalize_score(snapshot.decision_quality_raw)
    focus = normalize_score(snapshot.focus_stability_raw)
    reaction = 1 - normalize(snapshot.reaction_time_avg_ms, baseline.reaction_time_baseline_ms)

    cps = (
        0.25 * reasoning
        + 0.20 * clarity
        + 0.20 * decision
        + 0.20 * focus
        + 0.15 * reaction
    )
    return clamp(cps, 0.0, 1.0)


def calculate_brain_age_index(
    chronological_age: float, cps: float, k: float = 0.4
) -> BrainAgeIndex:
    """Cognitive age: an index of 0.5 keeps chronological age, k scales the effect."""
    brain_age = chronological_age * (1 - (cps - 0.5) * k)
    brain_age = clamp(
        brain_age,
        chronological_age - BRAIN_AGE_MAX_SHIFT_YEARS,
        chronological_age + BRAIN_AGE_MAX_SHIFT_YEARS,
    )
    return BrainAgeIndex(
        brain_age=_round1(brain_age),
        delta=_round1(brain_age - chronological_age),
    )


def calculate_fast_thinking_score(
    snapshot: CognitiveMetricsSnapshot, baseline: CognitiveBaseline
) -> int:
    accuracy = normalize_score(snapshot.fast_thinking_score_raw)
    reaction = 1 - normalize(snapshot.reaction_time_avg_ms, baseline.reaction_time_baseline_ms)
    return round_half_up(100 * (0.6 * accuracy + 0.4 * reaction))


def calculate_slow_thinking_score(snapshot: CognitiveMetricsSnapshot) -> int:
    return round_half_up(snapshot.slow_thinking_score_raw)


def calculate_critical_thinking_score(snapshot: CognitiveMetricsSnapshot) -> int:
    """Reasoning accuracy (60%) blended with clarity (40%)."""
    clarity = normalize_score(snapshot.clarity_score_raw)
    return round_half_up(100 * (0.6 * snapshot.reasoning_accuracy + 0.4 * clarity))


def calculate_focus_index(snapshot: CognitiveMetricsSnapshot) -> int:
    """Focus stability (50%), clarity (30%) and decision quality (20%)."""
    focus = normalize_score(snapshot.focus_stability_raw)
    clarity = normalize_score(snapshot.clarity_score_raw)
    decision = normalize_score(snapshot.decision_quality_raw)
    return round_half_up(100 * (0.5 * focus + 0.3 * clarity + 0.2 * decision))


def calculate_creative_score(snapshot: CognitiveMetricsSnapshot) -> int:
    return round_half_up(snapshot.creativity_raw)


def calculate_decision_quality_score(snapshot: CognitiveMetricsSnapshot) -> int:
    return round_half_up(snapshot.decision_quality_raw)


def calculate_philosophical_index(snapshot: CognitiveMetricsSnapshot) -> int:
    return round_half_up(snapshot.philosophical_depth_raw)


def calculate_skill_scores(
    snapshot: CognitiveMetricsSnapshot, baseline: CognitiveBaseline
) -> dict[str, int]:
    """All per-skill scores for one snapshot, keyed by skill."""
    return {
        "critical_thinking": calculate_critical_thinking_score(snapshot),
        "focus_index": calculate_focus_index(snapshot),
        "creativity": calculate_creative_score(snapshot),
        "decision_quality": calculate_decision_quality_score(snapshot),
        "philosophical_index": calculate_philosophical_index(snapshot),
        "fast_thinking": calculate_fast_thinking_score(snapshot, baseline),
        "slow_thinking": calculate_slow_thinking_score(snapshot),
    }


# ---------------------------------------------------------------------------
# Brain functions
# ---------------------------------------------------------------------------

def _function_values(
    snapshot: CognitiveMetricsSnapshot, *, round_memory: bool = True
) -> dict[str, float]:
    reasoning = snapshot.reasoning_accuracy * 100
    memory = (reasoning + snapshot.clarity_score_raw) / 2
    return {
        "Reasoning": reasoning,
        "Clarity": snapshot.clarity_score_raw,
        "Focus": snapshot.focus_stability_raw,
        "Creativity": snapshot.creativity_raw,
        "Decision Quality": snapshot.decision_quality_raw,
        "Memory": round_half_up(memory) if round_memory else memory,
    }


def _function_status(value: float) -> str:
    if value >= 80:
        return "excellent"
    if value >= 60:
        return "good"
    if value >= 40:
        return "moderate"
    return "low"


def get_brain_function_scores(
    snapshot: CognitiveMetricsSnapshot,
    previous: CognitiveMetricsSnapshot | None = None,
) -> list[BrainFunctionScore]:
    current_values = _function_values(snapshot)
    previous_values = (
        _function_values(previous, round_memory=False) if previous is not None else {}
    )

    scores: list[BrainFunctionScore] = []
    for name, current in current_values.items():
        trend = "stable"
        trend_percent = 0
        if name in previous_values:
            prev = previous_values[name]
            trend_percent = round_half_up((current - prev) / prev * 100) if prev > 0 else 0
            if trend_percent > TREND_THRESHOLD_PCT:
                trend = "up"
            elif trend_percent < -TREND_THRESHOLD_PCT:
                trend = "down"

        scores.append(BrainFunctionScore(
            name=name,
            score=round_half_up(current),
            trend=trend,
            trend_percent=abs(trend_percent),
            status=_function_status(current),
        ))
    return scores


# ---------------------------------------------------------------------------
# Insights
# ---------------------------------------------------------------------------

def generate_cognitive_insights(
    snapshot: CognitiveMetricsSnapshot,
    baseline: CognitiveBaseline,
    brain_age_delta: float,
) -> list[CognitiveInsight]:
    """Rule-based coaching insights, at most five."""
    insights: list[CognitiveInsight] = []

    if brain_age_delta < -1:
        insights.append(CognitiveInsight(
            id="brain-age-young",
            text=(
                f"Your Cognitive Age is {abs(brain_age_delta):.1f} years younger than your "
                "chronological age. Keep training Reasoning Workout 3-4 times per week."
            ),
            type="positive",
        ))
    elif brain_age_delta > 1:
        insights.append(CognitiveInsight(
            id="brain-age-old",
            text=(
                f"Your Cognitive Age is {brain_age_delta:.1f} years above baseline. "
                "Increase session frequency for improvement."
            ),
            type="suggestion",
        ))

    fast = calculate_fast_thinking_score(snapshot, baseline)
    slow = calculate_slow_thinking_score(snapshot)
    if slow > fast + 10:
        insights.append(CognitiveInsight(
            id="slow-dominant",
            text=(
                "Your Slow Thinking outperforms Fast Thinking. "
                "Consider more intuition drills in Fast mode."
            ),
            type="neutral",
        ))
    elif fast > slow + 10:
        insights.append(CognitiveInsight(
            id="fast-dominant",
            text=(
                "Your Fast Thinking is your strongest asset. "
                "Balance with more structured reasoning exercises."
            ),
            type="neutral",
        ))

    if snapshot.focus_stability_raw >= 80:
        insights.append(CognitiveInsight(
            id="focus-high",
            text="Focus Index is exceptional. Your concentration is in the top tier.",
            type="positive",
        ))
    elif snapshot.focus_stability_raw < 50:
        insights.append(CognitiveInsight(
            id="focus-low",
            text="Focus Index could improve. Try morning sessions when cognitive resources are fresh.",
            type="suggestion",
        ))

    if snapshot.sessions_completed >= 5:
        insights.append(CognitiveInsight(
            id="sessions-consistent",
            text=(
                f"{snapshot.sessions_completed} sessions this week. "
                "Consistency is building your cognitive edge."
            ),
            type="positive",
        ))

    if snapshot.clarity_score_raw >= 75:
        insights.append(CognitiveInsight(
            id="clarity-high",
            text="Clarity Lab training is paying off. Your conceptual precision is strong.",
            type="positive",
        ))

    return insights[:MAX_INSIGHTS]
