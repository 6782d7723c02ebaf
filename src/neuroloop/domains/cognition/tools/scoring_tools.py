"""MCP tools for the Synthesized Cognitive Index, readiness and cognitive profile."""

from __future__ import annotations

import json
import logging
import time
from typing import TYPE_CHECKING, Any

from fastmcp import FastMCP

if TYPE_CHECKING:
    from neuroloop.domains.cognition.connectors import CognitiveDataProvider

from neuroloop.domains.cognition.domain_logic.classification import (
    get_sci_level,
    get_sci_status_text,
)
from neuroloop.domains.cognition.domain_logic.cognitive_profile import (
    calculate_brain_age_index,
    calculate_performance_index,
    calculate_skill_scores,
    generate_cognitive_insights,
    get_brain_function_scores,
)
from neuroloop.domains.cognition.domain_logic.input_assembly import (
    build_baseline,
    build_behavioral_input,
    build_cognitive_metrics_input,
    build_metrics_snapshot,
    build_readiness_input,
    build_recovery_input,
    build_wearable_snapshot,
)
from neuroloop.domains.cognition.domain_logic.plan_targets import (
    get_targets_for_plan,
    resolve_plan_id,
)
from neuroloop.domains.cognition.domain_logic.readiness_calculator import compute_readiness
from neuroloop.domains.cognition.domain_logic.sci_calculator import calculate_sci
from neuroloop.domains.cognition.domain_logic.score_models import SCIBreakdown
from neuroloop.domains.cognition.domain_logic.thinking_systems import compute_fast_slow_systems

logger = logging.getLogger(__name__)

MAX_CHRONOLOGICAL_AGE = 130


# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------

def _validate_chronological_age(value: float) -> float:
    if not 0 < value <= MAX_CHRONOLOGICAL_AGE:
        raise ValueError(
            f"chronological_age must be in (0, {MAX_CHRONOLOGICAL_AGE}], got {value!r}"
        )
    return float(value)


def _sci_payload(sci: SCIBreakdown, plan_id: str) -> dict[str, Any]:
    return {
        "status": "ok",
        "plan": plan_id,
        "targets": get_targets_for_plan(plan_id).to_dict(),
        "sci": sci.to_dict(),
        "status_text": get_sci_status_text(sci.total),
        "level": get_sci_level(sci.total).value,
    }


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------

def register_scoring_tools(
    mcp: FastMCP,
    provider: CognitiveDataProvider,
    *,
    default_metric_value: float = 50.0,
    default_training_plan: str = "expert",
) -> None:
    """Register SCI, readiness and cognitive profile tools on the MCP server."""

    def _plan_for(plan_id: str | None) -> str:
        requested = plan_id or provider.get_training_plan() or default_training_plan
        return resolve_plan_id(requested).value

    @mcp.tool
    async def cognitive_index(plan_id: str | None = None) -> str:
        """Calculate the Synthesized Cognitive Index from the user's stored data.

        SCI = 0.50 x Cognitive Performance + 0.30 x Behavioral Engagement
        + 0.20 x Recovery Factor. Unset cognitive metrics default to the
        neutral midpoint; unknown plans use the expert targets.

        Args:
            plan_id: Optional plan override (light | expert | superhuman).
        """
        start_time = time.monotonic()
        metrics_row = await provider.get_cognitive_metrics()
        if metrics_row is None:
            return json.dumps({
                "status": "no_data",
                "message": "No cognitive metrics recorded yet. Complete an assessment first.",
            })

        progress = await provider.get_weekly_progress()
        detox = await provider.get_weekly_detox()

        plan = _plan_for(plan_id)
        targets = get_targets_for_plan(plan)
        sci = calculate_sci(
            build_cognitive_metrics_input(metrics_row, default_metric_value),
            build_behavioral_input(progress, targets),
            build_recovery_input(detox, targets),
        )

        payload = _sci_payload(sci, plan)
        payload.update(provider.get_provenance())
        logger.info(
            "cognitive_index computed: total=%d plan=%s (%.1f ms)",
            sci.total,
            plan,
            (time.monotonic() - start_time) * 1000,
        )
        return json.dumps(payload, indent=2)

    @mcp.tool
    async def calculate_cognitive_index(
        reasoning_accuracy: float | None = None,
        focus_stability: float | None = None,
        decision_quality: float | None = None,
        creativity: float | None = None,
        fast_thinking: float | None = None,
        slow_thinking: float | None = None,
        weekly_games_xp: float = 0,
        weekly_tasks_xp: float = 0,
        sessions_completed: float = 0,
        weekly_detox_minutes: float = 0,
        plan_id: str | None = None,
    ) -> str:
        """Calculate the SCI from explicitly supplied values.

        Omitted cognitive metrics default to the neutral midpoint. Weekly
        targets come from the given plan (expert when omitted or unknown).
        """
        plan = resolve_plan_id(plan_id or default_training_plan).value
        targets = get_targets_for_plan(plan)
        metrics_row = {
            "reasoning_accuracy": reasoning_accuracy,
            "focus_stability": focus_stability,
            "decision_quality": decision_quality,
            "creativity": creativity,
            "fast_thinking": fast_thinking,
            "slow_thinking": slow_thinking,
        }
        sci = calculate_sci(
            build_cognitive_metrics_input(metrics_row, default_metric_value),
            build_behavioral_input(
                {
                    "weekly_games_xp": weekly_games_xp,
                    "weekly_content_xp": weekly_tasks_xp,
                    "sessions_completed": sessions_completed,
                },
                targets,
            ),
            build_recovery_input({"total_minutes": weekly_detox_minutes}, targets),
        )
        return json.dumps(_sci_payload(sci, plan), indent=2)

    @mcp.tool
    async def cognitive_readiness() -> str:
        """Calculate today's cognitive readiness (LOW / MEDIUM / HIGH).

        Combines wearable biomarkers (HRV, resting HR, sleep duration and
        efficiency) with cognitive scores. Without wearable data the score
        is cognitive-only.
        """
        metrics_row = await provider.get_cognitive_metrics()
        if metrics_row is None:
            return json.dumps({
                "status": "no_data",
                "message": "No cognitive metrics recorded yet. Complete an assessment first.",
            })
        wearable_row = await provider.get_wearable_snapshot()

        result = compute_readiness(
            build_wearable_snapshot(wearable_row),
            build_readiness_input(metrics_row, default_metric_value),
        )
        payload = {"status": "ok", **result.to_dict()}
        payload.update(provider.get_provenance())
        return json.dumps(payload, indent=2)

    @mcp.tool
    async def cognitive_profile(chronological_age: float, include_insights: bool = True) -> str:
        """Brain-function scores, skill scores, thinking systems, cognitive age and insights.

        Trends and thinking-system deltas compare against the previous
        snapshot when one exists.

        Args:
            chronological_age: The user's age in years.
            include_insights: Whether to add rule-based coaching insights.
        """
        age = _validate_chronological_age(chronological_age)
        snapshot_row = await provider.get_metrics_snapshot()
        baseline_row = await provider.get_baseline()
        if snapshot_row is None or baseline_row is None:
            return json.dumps({
                "status": "no_data",
                "message": "A metrics snapshot and a baseline are both required.",
            })

        previous_row = await provider.get_previous_metrics_snapshot()

        snapshot = build_metrics_snapshot(snapshot_row)
        baseline = build_baseline(baseline_row)
        previous = build_metrics_snapshot(previous_row) if previous_row is not None else None
        cps = calculate_performance_index(snapshot, baseline)
        brain_age = calculate_brain_age_index(age, cps)

        payload: dict[str, Any] = {
            "status": "ok",
            "performance_index": round(cps, 4),
            "brain_age": brain_age.to_dict(),
            "brain_functions": [
                s.to_dict() for s in get_brain_function_scores(snapshot, previous)
            ],
            "skill_scores": calculate_skill_scores(snapshot, baseline),
            "thinking_systems": compute_fast_slow_systems(snapshot, previous).to_dict(),
        }
        if include_insights:
            payload["insights"] = [
                i.to_dict()
                for i in generate_cognitive_insights(snapshot, baseline, brain_age.delta)
            ]
        payload.update(provider.get_provenance())
        return json.dumps(payload, indent=2)
