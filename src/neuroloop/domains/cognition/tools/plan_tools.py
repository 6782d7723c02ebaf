"""MCP tools for training plan targets and the plan catalogue."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from fastmcp import FastMCP

if TYPE_CHECKING:
    from neuroloop.domains.cognition.domain_logic.plan_catalog import PlanRegistry

from neuroloop.domains.cognition.domain_logic.plan_catalog import get_plan_intensity_label
from neuroloop.domains.cognition.domain_logic.plan_targets import (
    get_targets_for_plan,
    resolve_plan_id,
)


def register_plan_tools(mcp: FastMCP, registry: PlanRegistry) -> None:
    """Register training plan tools on the MCP server."""

    @mcp.tool
    def training_plan_targets(plan_id: str | None = None) -> str:
        """Weekly SCI targets (games XP, tasks XP, detox minutes, sessions) for a plan.

        Unknown or missing plan ids resolve to the expert plan.
        """
        resolved = resolve_plan_id(plan_id)
        return json.dumps({
            "requested": plan_id,
            "plan": resolved.value,
            "fallback": plan_id != resolved.value,
            "targets": get_targets_for_plan(resolved).to_dict(),
        })

    @mcp.tool
    def list_training_plans() -> str:
        """List the available training plans with their weekly commitments."""
        return json.dumps({
            "plan_count": len(registry),
            "plans": [
                {
                    "id": p.id,
                    "name": p.name,
                    "tagline": p.tagline,
                    "intensity": p.intensity,
                    "intensity_label": get_plan_intensity_label(p.intensity),
                    "sessions_per_week": p.sessions_per_week,
                    "session_duration": p.session_duration,
                    "weekly_xp_target": p.weekly_xp_target,
                    "detox_weekly_minutes": p.detox.weekly_minutes,
                    "sci_targets": get_targets_for_plan(p.id).to_dict(),
                }
                for p in registry.all()
            ],
        }, indent=2)
