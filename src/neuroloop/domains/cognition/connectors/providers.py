"""Concrete CognitiveDataProvider implementations."""

from __future__ import annotations

from typing import Any

from neuroloop.domains.cognition.connectors.mock_data import (
    get_mock_baseline,
    get_mock_cognitive_metrics,
    get_mock_metrics_snapshot,
    get_mock_previous_metrics_snapshot,
    get_mock_wearable_snapshot,
    get_mock_weekly_detox,
    get_mock_weekly_progress,
)


class MockCognitiveDataProvider:
    """Uses mock data generators. Always available.

    ``with_wearable=False`` simulates a user without a connected device.
    """

    def __init__(self, training_plan: str | None = None, with_wearable: bool = True) -> None:
        self._training_plan = training_plan
        self._with_wearable = with_wearable

    async def get_cognitive_metrics(self) -> dict[str, Any] | None:
        return get_mock_cognitive_metrics()

    async def get_weekly_progress(self) -> dict[str, Any]:
        return get_mock_weekly_progress()

    async def get_weekly_detox(self) -> dict[str, Any]:
        return get_mock_weekly_detox()

    async def get_wearable_snapshot(self) -> dict[str, Any] | None:
        if not self._with_wearable:
            return None
        return get_mock_wearable_snapshot()

    async def get_metrics_snapshot(self) -> dict[str, Any] | None:
        return get_mock_metrics_snapshot()

    async def get_previous_metrics_snapshot(self) -> dict[str, Any] | None:
        return get_mock_previous_metrics_snapshot()

    async def get_baseline(self) -> dict[str, Any] | None:
        return get_mock_baseline()

    def get_training_plan(self) -> str | None:
        return self._training_plan

    @property
    def data_source(self) -> str:
        return "mock"

    def get_provenance(self) -> dict[str, str]:
        return {
            "data_source": self.data_source,
            "data_source_note": (
                "Using simulated training data. "
                "Connect the app backend for real measurements."
            ),
        }
