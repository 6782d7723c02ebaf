"""Mock cognitive data generators for development and testing.

Mock data represents an engaged user midway through an expert-plan week:
not elite, not just starting. Scores derived from it land in the "high" tier.
"""

from __future__ import annotations


def get_mock_cognitive_metrics() -> dict:
    """Return a mock ``user_cognitive_metrics`` row."""
    return {
        "reasoning_accuracy": 80,
        "focus_stability": 70,
        "decision_quality": 60,
        "creativity": 50,
        "fast_thinking": 60,
        "slow_thinking": 40,
        "visual_processing": 66,
    }


def get_mock_weekly_progress() -> dict:
    """Return mock weekly XP and session totals."""
    return {
        "weekly_games_xp": 50,
        "weekly_content_xp": 60,
        "sessions_completed": 3,
    }


def get_mock_weekly_detox() -> dict:
    return {"total_minutes": 150, "sessions": 4}


def get_mock_wearable_snapshot() -> dict:
    """Return a mock ``wearable_snapshots`` row for today."""
    return {
        "hrv_ms": 52,
        "resting_hr": 62,
        "sleep_duration_min": 430,
        "sleep_efficiency": 88,
    }


def get_mock_metrics_snapshot() -> dict:
    """Return mock raw session metrics (reasoning accuracy is 0-1)."""
    return {
        "reaction_time_avg_ms": 300,
        "reasoning_accuracy": 0.78,
        "clarity_score_raw": 76,
        "decision_quality_raw": 68,
        "creativity_raw": 62,
        "focus_stability_raw": 72,
        "philosophical_depth_raw": 58,
        "fast_thinking_score_raw": 70,
        "slow_thinking_score_raw": 74,
        "sessions_completed": 5,
    }


def get_mock_previous_metrics_snapshot() -> dict:
    """Return the mock snapshot from the week before."""
    return {
        "reaction_time_avg_ms": 315,
        "reasoning_accuracy": 0.74,
        "clarity_score_raw": 70,
        "decision_quality_raw": 66,
        "creativity_raw": 62,
        "focus_stability_raw": 66,
        "philosophical_depth_raw": 55,
        "fast_thinking_score_raw": 66,
        "slow_thinking_score_raw": 70,
        "sessions_completed": 4,
    }


def get_mock_baseline() -> dict:
    return {
        "reaction_time_baseline_ms": 320,
        "reasoning_accuracy_baseline": 0.7,
        "clarity_baseline": 65,
        "decision_quality_baseline": 60,
        "creativity_baseline": 55,
        "focus_stability_baseline": 65,
        "fast_thinking_baseline": 60,
        "slow_thinking_baseline": 65,
        "brain_age_baseline": 35,
    }
