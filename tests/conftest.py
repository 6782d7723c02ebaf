"""Shared test fixtures for NeuroLoop scoring tests."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pytest

# ---------------------------------------------------------------------------
# Test hermeticity
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _force_hermetic_test_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEFAULT_METRIC_VALUE", "50")
    monkeypatch.setenv("DEFAULT_TRAINING_PLAN", "expert")
    monkeypatch.setenv("PLAN_CATALOG_DIR", "")

# Allow running tests without `pip install -e .` by making `src/` importable.
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_SRC_DIR = _PROJECT_ROOT / "src"
if str(_SRC_DIR) not in sys.path:
    sys.path.insert(0, str(_SRC_DIR))

from neuroloop.domains.cognition.connectors.providers import (  # noqa: E402
    MockCognitiveDataProvider,
)
from neuroloop.domains.cognition.domain_logic.plan_catalog import (  # noqa: E402
    PlanRegistry,
    load_plan_directory,
)

PLAN_DIR = _SRC_DIR / "neuroloop" / "domains" / "cognition" / "plans"


# ---------------------------------------------------------------------------
# Providers and registries
# ---------------------------------------------------------------------------

class EmptyCognitiveDataProvider(MockCognitiveDataProvider):
    """A user who has not completed the initial assessment yet."""

    async def get_cognitive_metrics(self) -> dict[str, Any] | None:
        return None

    async def get_metrics_snapshot(self) -> dict[str, Any] | None:
        return None


@pytest.fixture
def mock_provider() -> MockCognitiveDataProvider:
    return MockCognitiveDataProvider()


@pytest.fixture
def empty_provider() -> EmptyCognitiveDataProvider:
    return EmptyCognitiveDataProvider()


@pytest.fixture
def plan_registry() -> PlanRegistry:
    registry = PlanRegistry()
    load_plan_directory(PLAN_DIR, registry)
    return registry
