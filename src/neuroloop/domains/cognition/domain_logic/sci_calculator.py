"""Deterministic SCI calculation: raw training inputs -> composite index.

Each component calculator is a pure function. Component scores are clamped
to [0, 100] before weighting and the aggregate total is clamped after
summation, so every result is a well-formed score.
"""

from __future__ import annotations

from neuroloop.domains.cognition.domain_logic.numeric import (
    clamp_score,
    ratio_percent,
    round_half_up,
)
from neuroloop.domains.cognition.domain_logic.score_models import (
    BE_WEIGHTS,
    CP_WEIGHTS,
    SCI_WEIGHTS,
    BehavioralEngagementBreakdown,
    BehavioralEngagementComponents,
    BehavioralEngagementInput,
    BehavioralEngagementResult,
    CognitiveMetricsInput,
    CognitivePerformanceBreakdown,
    CognitivePerformanceComponents,
    CognitivePerformanceResult,
    RecoveryFactorBreakdown,
    RecoveryInput,
    SCIBreakdown,
)


# ---------------------------------------------------------------------------
# Dual-process balance
# ---------------------------------------------------------------------------

def calculate_dual_process_balance(fast_score: float, slow_score: float) -> float:
    """Reward balance between System 1 and System 2, not magnitude.

    Perfect balance (fast == slow) = 100, imbalance of 100 or more = 0.
    """
    return max(0.0, 100 - abs(fast_score - slow_score))


# ---------------------------------------------------------------------------
# Component 1: Cognitive Performance (50% of SCI)
# ---------------------------------------------------------------------------

def calculate_cognitive_performance(metrics: CognitiveMetricsInput) -> CognitivePerformanceResult:
    """Weighted blend of skill scores and dual-process balance.

    Sub-signals:
        Reasoning (25%), Focus (25%), Decision quality (20%),
        Creativity (15%), Dual-process balance (15%)
    """
    balance = calculate_dual_process_balance(metrics.fast_thinking, metrics.slow_thinking)

    components = CognitivePerformanceComponents(
        reasoning=metrics.reasoning_accuracy,
        focus=metrics.focus_stability,
        decision_quality=metrics.decision_quality,
        creativity=metrics.creativity,
        dual_process_balance=balance,
    )

    score = (
        CP_WEIGHTS["reasoning"] * metrics.reasoning_accuracy
        + CP_WEIGHTS["focus"] * metrics.focus_stability
        + CP_WEIGHTS["decision_quality"] * metrics.decision_quality
        + CP_WEIGHTS["creativity"] * metrics.creativity
        + CP_WEIGHTS["dual_process_balance"] * balance
    )

    return CognitivePerformanceResult(score=clamp_score(score), components=components)


# ---------------------------------------------------------------------------
# Component 2: Behavioral Engagement (30% of SCI)
# ---------------------------------------------------------------------------

def calculate_behavioral_engagement(
    engagement: BehavioralEngagementInput,
) -> BehavioralEngagementResult:
    """Weekly activity against plan targets.

    Each ratio is capped at 100% before weighting, so over-performing one
    dimension cannot make up for neglecting another beyond its weight share.

    Sub-signals:
        Games XP (50%), Tasks XP (30%), Session consistency (20%)
    """
    games = ratio_percent(engagement.weekly_games_xp, engagement.games_target)
    tasks = ratio_percent(engagement.weekly_tasks_xp, engagement.tasks_target)
    sessions = ratio_percent(engagement.sessions_completed, engagement.sessions_required)

    components = BehavioralEngagementComponents(
        games_engagement=clamp_score(games),
        tasks_engagement=clamp_score(tasks),
        session_consistency=clamp_score(sessions),
    )

    score = (
        BE_WEIGHTS["games"] * games
        + BE_WEIGHTS["tasks"] * tasks
        + BE_WEIGHTS["session_consistency"] * sessions
    )

    return BehavioralEngagementResult(score=clamp_score(score), components=components)


# ---------------------------------------------------------------------------
# Component 3: Recovery Factor (20% of SCI)
# ---------------------------------------------------------------------------

def calculate_recovery_factor(recovery: RecoveryInput) -> int:
    """Weekly detox minutes as a capped percentage of the plan target."""
    return clamp_score(ratio_percent(recovery.weekly_detox_minutes, recovery.detox_target))


# ---------------------------------------------------------------------------
# Aggregator
# ---------------------------------------------------------------------------

def calculate_sci(
    metrics: CognitiveMetricsInput,
    behavioral: BehavioralEngagementInput,
    recovery: RecoveryInput,
) -> SCIBreakdown:
    """Calculate the full Synthesized Cognitive Index with breakdown.

    The total is rounded from the unrounded weighted contributions, so the
    three reported ``weighted`` values may differ from it by one point.
    """
    cp = calculate_cognitive_performance(metrics)
    be = calculate_behavioral_engagement(behavioral)
    rf = calculate_recovery_factor(recovery)

    cp_weighted = SCI_WEIGHTS["cognitive_performance"] * cp.score
    be_weighted = SCI_WEIGHTS["behavioral_engagement"] * be.score
    rf_weighted = SCI_WEIGHTS["recovery_factor"] * rf

    total = clamp_score(cp_weighted + be_weighted + rf_weighted)

    return SCIBreakdown(
        total=total,
        cognitive_performance=CognitivePerformanceBreakdown(
            score=cp.score,
            weighted=round_half_up(cp_weighted),
            components=cp.components,
        ),
        behavioral_engagement=BehavioralEngagementBreakdown(
            score=be.score,
            weighted=round_half_up(be_weighted),
            components=be.components,
        ),
        recovery_factor=RecoveryFactorBreakdown(
            score=rf,
            weighted=round_half_up(rf_weighted),
        ),
        details={"weights": dict(SCI_WEIGHTS)},
    )
