"""Unit tests for the scoring and plan MCP tools."""

from __future__ import annotations

import asyncio
import json
from typing import Any

import pytest
from fastmcp import Client

from neuroloop.core.server.app import create_app
from neuroloop.domains.cognition.connectors.providers import MockCognitiveDataProvider


def _run(coro):
    """Run an async coroutine synchronously (no pytest-asyncio required)."""
    loop = asyncio.new_event_loop()
    try:
        return loop.run_until_complete(coro)
    finally:
        loop.close()


def _call(provider, tool_name: str, arguments: dict[str, Any] | None = None) -> dict[str, Any]:
    """Call a tool on a fresh server and decode its JSON text result."""
    mcp = create_app(data_provider_override=provider)

    async def _go():
        async with Client(mcp) as client:
            result = await client.call_tool(tool_name, arguments or {})
            content = getattr(result, "content", result)
            return json.loads(content[0].text)

    return _run(_go())


# ---------------------------------------------------------------------------
# cognitive_index
# ---------------------------------------------------------------------------

class TestCognitiveIndexTool:
    def test_mock_week_on_expert_plan(self, mock_provider):
        data = _call(mock_provider, "cognitive_index")
        assert data["status"] == "ok"
        assert data["plan"] == "expert"
        assert data["sci"]["cognitive_performance"]["score"] == 69
        assert data["sci"]["behavioral_engagement"]["score"] == 67
        assert data["sci"]["recovery_factor"]["score"] == 100
        assert data["sci"]["total"] == 75
        assert data["level"] == "high"
        assert data["status_text"] == "High strategic clarity"
        assert data["data_source"] == "mock"

    def test_plan_override(self, mock_provider):
        data = _call(mock_provider, "cognitive_index", {"plan_id": "light"})
        assert data["plan"] == "light"
        assert data["targets"]["games_xp"] == 60
        # games 50/60, tasks 60/30 (capped), sessions 3/3
        assert data["sci"]["behavioral_engagement"]["score"] == 92
        assert data["sci"]["total"] == 82
        assert data["level"] == "elite"

    def test_unknown_plan_uses_expert(self, mock_provider):
        data = _call(mock_provider, "cognitive_index", {"plan_id": "platinum"})
        assert data["plan"] == "expert"
        assert data["sci"]["total"] == 75

    def test_provider_plan_used_when_no_override(self):
        data = _call(MockCognitiveDataProvider(training_plan="superhuman"), "cognitive_index")
        assert data["plan"] == "superhuman"
        assert data["targets"]["sessions_required"] == 7

    def test_no_metrics_returns_no_data(self, empty_provider):
        data = _call(empty_provider, "cognitive_index")
        assert data["status"] == "no_data"


class TestCalculateCognitiveIndexTool:
    def test_explicit_values(self, mock_provider):
        data = _call(
            mock_provider,
            "calculate_cognitive_index",
            {
                "reasoning_accuracy": 80,
                "focus_stability": 70,
                "decision_quality": 60,
                "creativity": 50,
                "fast_thinking": 60,
                "slow_thinking": 40,
                "weekly_games_xp": 50,
                "weekly_tasks_xp": 60,
                "sessions_completed": 3,
                "weekly_detox_minutes": 150,
            },
        )
        assert data["sci"]["total"] == 75
        assert data["level"] == "high"

    def test_omitted_metrics_default_to_midpoint(self, mock_provider):
        data = _call(mock_provider, "calculate_cognitive_index", {})
        components = data["sci"]["cognitive_performance"]["components"]
        assert components["reasoning"] == 50
        assert components["dual_process_balance"] == 100
        assert data["sci"]["behavioral_engagement"]["score"] == 0
        assert data["sci"]["recovery_factor"]["score"] == 0


# ---------------------------------------------------------------------------
# cognitive_readiness
# ---------------------------------------------------------------------------

class TestCognitiveReadinessTool:
    def test_with_wearable(self, mock_provider):
        data = _call(mock_provider, "cognitive_readiness")
        assert data["status"] == "ok"
        assert data["physio_score"] == 65
        assert data["cognitive_score"] == 66
        assert data["readiness_score"] == 66
        assert data["classification"] == "MEDIUM"
        assert data["has_wearable_data"] is True
        assert len(data["biomarkers_used"]) == 4

    def test_without_wearable_is_cognitive_only(self):
        data = _call(MockCognitiveDataProvider(with_wearable=False), "cognitive_readiness")
        assert data["physio_score"] is None
        assert data["readiness_score"] == data["cognitive_score"] == 66
        assert data["has_wearable_data"] is False

    def test_no_metrics_returns_no_data(self, empty_provider):
        assert _call(empty_provider, "cognitive_readiness")["status"] == "no_data"


# ---------------------------------------------------------------------------
# cognitive_profile
# ---------------------------------------------------------------------------

class TestCognitiveProfileTool:
    def test_profile(self, mock_provider):
        data = _call(mock_provider, "cognitive_profile", {"chronological_age": 40})
        assert data["status"] == "ok"
        assert 0 <= data["performance_index"] <= 1
        assert data["brain_age"]["delta"] < 0
        assert len(data["brain_functions"]) == 6
        assert any(i["id"] == "brain-age-young" for i in data["insights"])

    def test_profile_skill_scores_and_thinking_systems(self, mock_provider):
        data = _call(mock_provider, "cognitive_profile", {"chronological_age": 40})
        assert data["skill_scores"]["critical_thinking"] == 77
        assert data["skill_scores"]["philosophical_index"] == 58
        systems = data["thinking_systems"]
        assert systems["fast"]["score"] == 55
        assert systems["fast"]["delta"] == 4
        assert systems["slow"]["score"] == 64
        assert systems["slow"]["delta"] == 3
        assert systems["slow"]["level"] == "moderate"

    def test_profile_trends_against_previous_week(self, mock_provider):
        data = _call(mock_provider, "cognitive_profile", {"chronological_age": 40})
        focus = next(f for f in data["brain_functions"] if f["name"] == "Focus")
        # 72 vs 66 last week
        assert focus["trend"] == "up"
        assert focus["trend_percent"] == 9

    def test_without_insights(self, mock_provider):
        data = _call(
            mock_provider, "cognitive_profile", {"chronological_age": 40, "include_insights": False}
        )
        assert "insights" not in data

    def test_invalid_age_rejected(self, mock_provider):
        with pytest.raises(Exception):
            _call(mock_provider, "cognitive_profile", {"chronological_age": -3})

    def test_no_snapshot_returns_no_data(self, empty_provider):
        data = _call(empty_provider, "cognitive_profile", {"chronological_age": 40})
        assert data["status"] == "no_data"


# ---------------------------------------------------------------------------
# plan tools
# ---------------------------------------------------------------------------

class TestPlanTools:
    def test_targets_for_known_plan(self, mock_provider):
        data = _call(mock_provider, "training_plan_targets", {"plan_id": "superhuman"})
        assert data["plan"] == "superhuman"
        assert data["fallback"] is False
        assert data["targets"]["detox_minutes"] == 180

    def test_unknown_plan_falls_back(self, mock_provider):
        data = _call(mock_provider, "training_plan_targets", {"plan_id": "unknown"})
        assert data["plan"] == "expert"
        assert data["fallback"] is True
        assert data["targets"] == {
            "games_xp": 100,
            "tasks_xp": 60,
            "detox_minutes": 120,
            "sessions_required": 5,
        }

    def test_list_plans(self, mock_provider):
        data = _call(mock_provider, "list_training_plans")
        assert data["plan_count"] == 3
        by_id = {p["id"]: p for p in data["plans"]}
        assert by_id["light"]["intensity_label"] == "Basso"
        assert by_id["expert"]["sci_targets"]["games_xp"] == 100
        assert by_id["superhuman"]["detox_weekly_minutes"] == 180
