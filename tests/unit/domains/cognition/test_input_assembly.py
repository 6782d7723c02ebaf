"""Tests for building calculator inputs from raw stored rows."""

from __future__ import annotations

from neuroloop.domains.cognition.domain_logic.input_assembly import (
    build_baseline,
    build_behavioral_input,
    build_cognitive_metrics_input,
    build_metrics_snapshot,
    build_readiness_input,
    build_recovery_input,
    build_wearable_snapshot,
)
from neuroloop.domains.cognition.domain_logic.plan_targets import get_targets_for_plan
from neuroloop.domains.cognition.domain_logic.readiness_models import WearableSnapshot


class TestCognitiveMetricsInput:
    def test_missing_fields_use_default(self):
        metrics = build_cognitive_metrics_input({"reasoning_accuracy": 80}, default=50)
        assert metrics.reasoning_accuracy == 80
        assert metrics.focus_stability == 50
        assert metrics.slow_thinking == 50

    def test_none_row_is_all_default(self):
        metrics = build_cognitive_metrics_input(None, default=42)
        assert metrics.creativity == 42
        assert metrics.fast_thinking == 42

    def test_zero_is_a_real_value(self):
        metrics = build_cognitive_metrics_input({"creativity": 0}, default=50)
        assert metrics.creativity == 0

    def test_non_numeric_values_use_default(self):
        row = {
            "reasoning_accuracy": "n/a",
            "focus_stability": float("nan"),
            "decision_quality": True,
            "creativity": "64",
        }
        metrics = build_cognitive_metrics_input(row, default=50)
        assert metrics.reasoning_accuracy == 50
        assert metrics.focus_stability == 50
        assert metrics.decision_quality == 50
        assert metrics.creativity == 64.0


class TestBehavioralAndRecovery:
    def test_behavioral_uses_plan_targets(self):
        targets = get_targets_for_plan("light")
        engagement = build_behavioral_input(
            {"weekly_games_xp": 30, "weekly_content_xp": 15, "sessions_completed": 2}, targets
        )
        assert engagement.games_target == 60
        assert engagement.tasks_target == 30
        assert engagement.sessions_required == 3
        assert engagement.weekly_tasks_xp == 15

    def test_missing_progress_is_zero(self):
        engagement = build_behavioral_input(None, get_targets_for_plan("expert"))
        assert engagement.weekly_games_xp == 0
        assert engagement.weekly_tasks_xp == 0
        assert engagement.sessions_completed == 0

    def test_recovery(self):
        recovery = build_recovery_input({"total_minutes": 95}, get_targets_for_plan("superhuman"))
        assert recovery.weekly_detox_minutes == 95
        assert recovery.detox_target == 180

    def test_recovery_missing_minutes(self):
        recovery = build_recovery_input({}, get_targets_for_plan("expert"))
        assert recovery.weekly_detox_minutes == 0


class TestReadinessInput:
    def test_working_memory_from_visual_processing(self):
        readiness = build_readiness_input({"visual_processing": 71, "focus_stability": 64}, default=50)
        assert readiness.working_memory_score == 71
        assert readiness.focus_index == 64
        assert readiness.reasoning_accuracy == 50


class TestWearableSnapshot:
    def test_no_row_is_none(self):
        assert build_wearable_snapshot(None) is None

    def test_full_row(self):
        snapshot = build_wearable_snapshot(
            {"hrv_ms": "52", "resting_hr": 62, "sleep_duration_min": 430, "sleep_efficiency": 88}
        )
        assert snapshot == WearableSnapshot(
            hrv_ms=52.0, resting_hr=62.0, sleep_duration_min=430.0, sleep_efficiency=88.0
        )

    def test_zero_and_missing_readings_are_absent(self):
        snapshot = build_wearable_snapshot({"hrv_ms": 0, "resting_hr": None, "sleep_efficiency": -1})
        assert snapshot is not None
        assert snapshot.present_fields() == []

    def test_partial_row(self):
        snapshot = build_wearable_snapshot({"sleep_duration_min": 400})
        assert snapshot.present_fields() == ["sleep_duration_min"]


class TestProfileRows:
    def test_metrics_snapshot(self):
        snapshot = build_metrics_snapshot({"reasoning_accuracy": 0.8, "sessions_completed": "4"})
        assert snapshot.reasoning_accuracy == 0.8
        assert snapshot.sessions_completed == 4
        assert snapshot.clarity_score_raw == 0

    def test_baseline_optional_brain_age(self):
        assert build_baseline({}).brain_age_baseline is None
        assert build_baseline({"brain_age_baseline": 35}).brain_age_baseline == 35
