"""Training plan catalogue: models, YAML loader and in-memory registry."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# XP values
# ---------------------------------------------------------------------------

XP_VALUES = {
    # Games (full session of ~5 exercises)
    "game_complete": 25,
    "game_perfect": 10,  # bonus for a 90%+ score
    # Individual exercises by difficulty
    "exercise_easy": 3,
    "exercise_medium": 5,
    "exercise_hard": 8,
    # Content
    "podcast_complete": 15,
    "reading_complete": 20,
    "book_chapter_complete": 30,
    # Detox
    "detox_per_minute": 1,
    "detox_weekly_bonus": 50,
}


def get_exercise_xp(difficulty: str) -> int:
    """XP for one exercise; unknown difficulties earn the medium value."""
    return XP_VALUES.get(f"exercise_{difficulty}", XP_VALUES["exercise_medium"])


_PLAN_COLORS = {
    "light": "emerald",
    "expert": "blue",
    "superhuman": "red",
}

_INTENSITY_LABELS = {
    "low": "Basso",
    "medium": "Medio",
    "high": "Alto",
}


def get_plan_color(plan_id: str) -> str | None:
    return _PLAN_COLORS.get(plan_id)


def get_plan_intensity_label(intensity: str) -> str | None:
    return _INTENSITY_LABELS.get(intensity)


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------

@dataclass
class SessionContent:
    type: str  # podcast | reading | book-extract | none
    required: bool
    description: str
    duration: str = ""


@dataclass
class SessionConfig:
    id: str
    name: str
    description: str
    duration: str
    thinking_systems: list[str]
    games_focus: str       # S1 | S2 | S1+S2
    games_intensity: str   # light | medium | heavy
    content: SessionContent | None = None


@dataclass
class DetoxRequirement:
    weekly_minutes: int
    min_session_minutes: int
    xp_per_minute: int
    bonus_xp: int


@dataclass
class TrainingPlan:
    id: str
    name: str
    tagline: str
    description: str
    philosophy: str
    sessions_per_week: int
    session_duration: str
    content_per_week: int
    intensity: str
    color: str
    icon: str
    weekly_xp_target: int
    detox: DetoxRequirement
    target_audience: list[str] = field(default_factory=list)
    content_types: list[str] = field(default_factory=list)
    sessions: list[SessionConfig] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

class PlanRegistry:
    """In-memory registry of loaded training plans."""

    def __init__(self) -> None:
        self._plans: dict[str, TrainingPlan] = {}

    def register(self, plan: TrainingPlan) -> None:
        if plan.id in self._plans:
            raise ValueError(f"Duplicate training plan id registered: {plan.id!r}")
        self._plans[plan.id] = plan

    def get(self, plan_id: str) -> TrainingPlan | None:
        return self._plans.get(plan_id)

    def all(self) -> list[TrainingPlan]:
        return list(self._plans.values())

    def __len__(self) -> int:
        return len(self._plans)


# ---------------------------------------------------------------------------
# Loader
# ---------------------------------------------------------------------------

def load_plan_directory(directory: str | Path, registry: PlanRegistry) -> int:
    """Load all YAML plan definitions from a directory.

    Returns the number of plans loaded. Files starting with an underscore are
    skipped; a file that fails to parse is logged and skipped.
    """
    directory = Path(directory)
    if not directory.is_dir():
        logger.warning("Plan directory does not exist: %s", directory)
        return 0

    count = 0
    for path in sorted(directory.glob("*.yaml")):
        if path.name.startswith("_"):
            continue
        try:
            plan = load_plan_file(path)
            registry.register(plan)
            count += 1
            logger.info("Loaded training plan: %s", plan.id)
        except Exception:
            logger.exception("Failed to load training plan from %s", path)
    return count


def _parse_session(data: dict[str, Any]) -> SessionConfig:
    content_data = data.get("content")
    games = data.get("games", {})
    return SessionConfig(
        id=data["id"],
        name=data["name"],
        description=data.get("description", ""),
        duration=data.get("duration", ""),
        thinking_systems=data.get("thinking_systems", []),
        games_focus=games.get("focus", "S1+S2"),
        games_intensity=games.get("intensity", "medium"),
        content=SessionContent(
            type=content_data["type"],
            required=bool(content_data.get("required", False)),
            description=content_data.get("description", "").strip(),
            duration=content_data.get("duration", ""),
        ) if content_data else None,
    )


def load_plan_file(path: Path) -> TrainingPlan:
    """Parse a YAML file into a TrainingPlan instance."""
    with open(path, encoding="utf-8") as f:
        data: dict[str, Any] = yaml.safe_load(f)

    detox = data.get("detox", {})

    return TrainingPlan(
        id=data["id"],
        name=data["name"],
        tagline=data.get("tagline", ""),
        description=data.get("description", "").strip(),
        philosophy=data.get("philosophy", "").strip(),
        sessions_per_week=int(data["sessions_per_week"]),
        session_duration=data.get("session_duration", ""),
        content_per_week=int(data.get("content_per_week", 0)),
        intensity=data["intensity"],
        color=data.get("color", ""),
        icon=data.get("icon", ""),
        weekly_xp_target=int(data["weekly_xp_target"]),
        detox=DetoxRequirement(
            weekly_minutes=int(detox["weekly_minutes"]),
            min_session_minutes=int(detox.get("min_session_minutes", 0)),
            xp_per_minute=int(detox.get("xp_per_minute", XP_VALUES["detox_per_minute"])),
            bonus_xp=int(detox.get("bonus_xp", 0)),
        ),
        target_audience=data.get("target_audience", []),
        content_types=data.get("content_types", []),
        sessions=[_parse_session(s) for s in data.get("sessions", [])],
    )
