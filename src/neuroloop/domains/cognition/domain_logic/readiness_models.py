"""Cognitive readiness models and biomarker constants."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum


# ---------------------------------------------------------------------------
# Domain constants
# ---------------------------------------------------------------------------

BIOMARKER_NAMES = [
    "hrv_ms",
    "resting_hr",
    "sleep_duration_min",
    "sleep_efficiency",
]

# Physio weights: HRV is the most direct autonomic recovery marker, sleep
# duration next; weights are renormalized over the biomarkers actually reported.
PHYSIO_WEIGHTS = {
    "hrv_ms": 0.35,
    "resting_hr": 0.20,
    "sleep_duration_min": 0.25,
    "sleep_efficiency": 0.20,
}

COGNITIVE_READINESS_WEIGHTS = {
    "reasoning_accuracy": 0.25,
    "focus_index": 0.25,
    "working_memory_score": 0.20,
    "fast_thinking_score": 0.15,
    "slow_thinking_score": 0.15,
}

READINESS_WEIGHTS = {
    "physio": 0.40,
    "cognitive": 0.60,
}

# Biomarker normalization anchors (value mapping to signal 0 and 1)
HRV_FLOOR_MS = 20.0
HRV_CEILING_MS = 80.0
RESTING_HR_BEST_BPM = 50.0
RESTING_HR_WORST_BPM = 90.0
SLEEP_OPTIMAL_MIN = 480.0
SLEEP_TOLERANCE_MIN = 180.0
SLEEP_EFFICIENCY_FLOOR_PCT = 70.0
SLEEP_EFFICIENCY_CEILING_PCT = 95.0

READINESS_HIGH_THRESHOLD = 70
READINESS_MEDIUM_THRESHOLD = 40


class ReadinessClassification(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class WearableSnapshot:
    """One day of wearable readings; ``None`` means the device did not report it."""

    hrv_ms: float | None = None
    resting_hr: float | None = None
    sleep_duration_min: float | None = None
    sleep_efficiency: float | None = None

    def present_fields(self) -> list[str]:
        return [name for name in BIOMARKER_NAMES if getattr(self, name) is not None]


@dataclass(frozen=True)
class CognitiveReadinessInput:
    reasoning_accuracy: float
    focus_index: float
    working_memory_score: float
    fast_thinking_score: float
    slow_thinking_score: float


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------

@dataclass
class ReadinessResult:
    physio_score: int | None
    cognitive_score: int
    readiness_score: int
    classification: ReadinessClassification
    biomarkers_used: list[str] = field(default_factory=list)
    details: dict = field(default_factory=dict)

    @property
    def has_wearable_data(self) -> bool:
        return self.physio_score is not None

    def to_dict(self) -> dict:
        data = asdict(self)
        data["classification"] = self.classification.value
        data["has_wearable_data"] = self.has_wearable_data
        return data
