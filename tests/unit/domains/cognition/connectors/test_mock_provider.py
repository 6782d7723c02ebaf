"""Tests for the mock cognitive data provider."""

from __future__ import annotations

import asyncio

from neuroloop.domains.cognition.connectors import CognitiveDataProvider
from neuroloop.domains.cognition.connectors.providers import MockCognitiveDataProvider


def _run(coro):
    """Run an async coroutine synchronously (no pytest-asyncio required)."""
    loop = asyncio.new_event_loop()
    try:
        return loop.run_until_complete(coro)
    finally:
        loop.close()


def test_satisfies_protocol():
    assert isinstance(MockCognitiveDataProvider(), CognitiveDataProvider)


def test_provenance_marks_mock():
    provider = MockCognitiveDataProvider()
    assert provider.data_source == "mock"
    assert provider.get_provenance()["data_source"] == "mock"


def test_metrics_row_has_all_scoring_fields():
    row = _run(MockCognitiveDataProvider().get_cognitive_metrics())
    for name in (
        "reasoning_accuracy",
        "focus_stability",
        "decision_quality",
        "creativity",
        "fast_thinking",
        "slow_thinking",
        "visual_processing",
    ):
        assert name in row


def test_wearable_can_be_disconnected():
    assert _run(MockCognitiveDataProvider(with_wearable=False).get_wearable_snapshot()) is None
    assert _run(MockCognitiveDataProvider().get_wearable_snapshot())["hrv_ms"] == 52


def test_previous_snapshot_precedes_current():
    provider = MockCognitiveDataProvider()
    current = _run(provider.get_metrics_snapshot())
    previous = _run(provider.get_previous_metrics_snapshot())
    assert set(previous) == set(current)
    assert previous["sessions_completed"] < current["sessions_completed"]


def test_training_plan():
    assert MockCognitiveDataProvider().get_training_plan() is None
    assert MockCognitiveDataProvider(training_plan="light").get_training_plan() == "light"
