"""Cognitive data connectors: abstraction layer for score input retrieval."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class CognitiveDataProvider(Protocol):
    """Abstract interface for the raw rows the scoring engine consumes.

    Tools call these methods without knowing whether data comes from the
    app backend, a wearable sync or the mock generators.
    """

    async def get_cognitive_metrics(self) -> dict[str, Any] | None:
        """Current skill scores (0-100); unset fields may be None."""
        ...

    async def get_weekly_progress(self) -> dict[str, Any]:
        """This week's games XP, content XP and completed sessions."""
        ...

    async def get_weekly_detox(self) -> dict[str, Any]:
        """This week's digital detox total."""
        ...

    async def get_wearable_snapshot(self) -> dict[str, Any] | None:
        """Today's wearable biomarkers, or None without a connected device."""
        ...

    async def get_metrics_snapshot(self) -> dict[str, Any] | None:
        """Raw session metrics for the cognitive profile."""
        ...

    async def get_previous_metrics_snapshot(self) -> dict[str, Any] | None:
        """The snapshot before the current one, or None on the first week."""
        ...

    async def get_baseline(self) -> dict[str, Any] | None:
        """The user's assessment baseline."""
        ...

    def get_training_plan(self) -> str | None:
        """The user's selected training plan id, if any."""
        ...

    @property
    def data_source(self) -> str:
        """Label for the active data source."""
        ...

    def get_provenance(self) -> dict[str, str]:
        """Return provenance metadata suitable for merging into tool output."""
        ...
