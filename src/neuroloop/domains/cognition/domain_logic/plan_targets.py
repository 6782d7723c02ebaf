"""Weekly SCI targets per training plan."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class TrainingPlanId(str, Enum):
    LIGHT = "light"
    EXPERT = "expert"
    SUPERHUMAN = "superhuman"


# Expert is the de facto plan for new or unset users.
DEFAULT_PLAN = TrainingPlanId.EXPERT


@dataclass(frozen=True)
class PlanTargets:
    games_xp: int
    tasks_xp: int
    detox_minutes: int
    sessions_required: int

    def to_dict(self) -> dict:
        return asdict(self)


DEFAULT_TARGETS: dict[TrainingPlanId, PlanTargets] = {
    TrainingPlanId.LIGHT: PlanTargets(
        games_xp=60, tasks_xp=30, detox_minutes=90, sessions_required=3,
    ),
    TrainingPlanId.EXPERT: PlanTargets(
        games_xp=100, tasks_xp=60, detox_minutes=120, sessions_required=5,
    ),
    TrainingPlanId.SUPERHUMAN: PlanTargets(
        games_xp=160, tasks_xp=100, detox_minutes=180, sessions_required=7,
    ),
}


def resolve_plan_id(plan_id: str | TrainingPlanId | None) -> TrainingPlanId:
    """Map a raw plan identifier onto the closed plan set.

    Anything that is not a known plan (including None or "") resolves to
    the expert plan.
    """
    if isinstance(plan_id, TrainingPlanId):
        return plan_id
    try:
        return TrainingPlanId(plan_id)
    except ValueError:
        logger.debug("Unknown training plan %r; falling back to %s", plan_id, DEFAULT_PLAN.value)
        return DEFAULT_PLAN


def get_targets_for_plan(plan_id: str | TrainingPlanId | None) -> PlanTargets:
    return DEFAULT_TARGETS[resolve_plan_id(plan_id)]
