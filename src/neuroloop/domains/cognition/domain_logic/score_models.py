"""Synthesized Cognitive Index (SCI) models and weighting constants.

SCI = (0.50 x CP) + (0.30 x BE) + (0.20 x RF)

    CP = Cognitive Performance (raw abilities + dual-process balance)
    BE = Behavioral Engagement (games, tasks, session consistency)
    RF = Recovery Factor (digital detox)
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum


# ---------------------------------------------------------------------------
# Weights (each group sums to 1.0)
# ---------------------------------------------------------------------------

SCI_WEIGHTS = {
    "cognitive_performance": 0.50,
    "behavioral_engagement": 0.30,
    "recovery_factor": 0.20,
}

CP_WEIGHTS = {
    "reasoning": 0.25,
    "focus": 0.25,
    "decision_quality": 0.20,
    "creativity": 0.15,
    "dual_process_balance": 0.15,
}

BE_WEIGHTS = {
    "games": 0.50,
    "tasks": 0.30,
    "session_consistency": 0.20,
}

SCORE_MIN = 0
SCORE_MAX = 100


class SCILevel(str, Enum):
    ELITE = "elite"
    HIGH = "high"
    MODERATE = "moderate"
    DEVELOPING = "developing"
    EARLY = "early"


# (lower bound inclusive, level, status text), highest tier first
SCI_TIERS: list[tuple[int, SCILevel, str]] = [
    (80, SCILevel.ELITE, "Elite cognitive integration"),
    (65, SCILevel.HIGH, "High strategic clarity"),
    (50, SCILevel.MODERATE, "Developing strategic capacity"),
    (35, SCILevel.DEVELOPING, "Building cognitive foundation"),
]
SCI_FLOOR_TIER: tuple[SCILevel, str] = (SCILevel.EARLY, "Early activation phase")


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CognitiveMetricsInput:
    """Raw skill scores, nominally 0-100 (not validated)."""

    reasoning_accuracy: float
    focus_stability: float
    decision_quality: float
    creativity: float
    fast_thinking: float
    slow_thinking: float


@dataclass(frozen=True)
class BehavioralEngagementInput:
    weekly_games_xp: float
    games_target: float
    weekly_tasks_xp: float
    tasks_target: float
    sessions_completed: float
    sessions_required: float


@dataclass(frozen=True)
class RecoveryInput:
    weekly_detox_minutes: float
    detox_target: float


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

@dataclass
class CognitivePerformanceComponents:
    reasoning: float
    focus: float
    decision_quality: float
    creativity: float
    dual_process_balance: float


@dataclass
class CognitivePerformanceResult:
    score: int
    components: CognitivePerformanceComponents


@dataclass
class BehavioralEngagementComponents:
    games_engagement: int
    tasks_engagement: int
    session_consistency: int


@dataclass
class BehavioralEngagementResult:
    score: int
    components: BehavioralEngagementComponents


@dataclass
class CognitivePerformanceBreakdown:
    score: int
    weighted: int
    components: CognitivePerformanceComponents


@dataclass
class BehavioralEngagementBreakdown:
    score: int
    weighted: int
    components: BehavioralEngagementComponents


@dataclass
class RecoveryFactorBreakdown:
    score: int
    weighted: int


@dataclass
class SCIBreakdown:
    """Full SCI decomposition; the three weighted values sum (visually) to total."""

    total: int
    cognitive_performance: CognitivePerformanceBreakdown
    behavioral_engagement: BehavioralEngagementBreakdown
    recovery_factor: RecoveryFactorBreakdown
    details: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        return asdict(self)
