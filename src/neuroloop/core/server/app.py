"""NeuroLoop scoring MCP server: application factory.

This module provides:
- create_app() for testability (integration tests create fresh server instances)
- Module-level `mcp` variable for FastMCP discovery
"""

from __future__ import annotations

import logging
from pathlib import Path

from fastmcp import FastMCP

from neuroloop.core.config.settings import get_settings
from neuroloop.domains.cognition.connectors import CognitiveDataProvider
from neuroloop.domains.cognition.connectors.providers import MockCognitiveDataProvider
from neuroloop.domains.cognition.domain_logic.plan_catalog import (
    PlanRegistry,
    load_plan_directory,
)
from neuroloop.domains.cognition.prompts.cognition_prompts import register_cognition_prompts
from neuroloop.domains.cognition.resources.plans import register_plan_resources
from neuroloop.domains.cognition.tools.plan_tools import register_plan_tools
from neuroloop.domains.cognition.tools.scoring_tools import register_scoring_tools

logger = logging.getLogger(__name__)

# Training plan YAML definitions live under src/neuroloop/domains/cognition/plans/
_PLAN_DIR = Path(__file__).resolve().parent.parent.parent / "domains" / "cognition" / "plans"


def create_app(
    *,
    data_provider_override: CognitiveDataProvider | None = None,
    plan_dir_override: str | Path | None = None,
) -> FastMCP:
    """Create and configure the NeuroLoop scoring MCP server.

    1. Creates the FastMCP server instance
    2. Loads the training plan catalogue
    3. Initializes the cognitive data provider (mock for now)
    4. Registers all tools, resources, and prompts
    """
    settings = get_settings()

    server = FastMCP(
        "NeuroLoop Scoring",
        instructions=(
            "NeuroLoop cognitive scoring server. Computes the Synthesized Cognitive "
            "Index, daily cognitive readiness and cognitive profile from training, "
            "detox and wearable data, and describes the available training plans."
        ),
    )

    # --- Training plan catalogue ---
    plan_dir = Path(plan_dir_override or settings.plan_catalog_dir or _PLAN_DIR)
    registry = PlanRegistry()
    plan_count = load_plan_directory(plan_dir, registry)
    logger.info("Loaded %d training plans from %s", plan_count, plan_dir)

    # --- Data provider ---
    if data_provider_override is not None:
        provider = data_provider_override
    else:
        provider = MockCognitiveDataProvider(training_plan=settings.default_training_plan)
        logger.info("Using mock cognitive data provider")

    @server.tool
    def health_check() -> dict:
        """Check server health and return basic status information."""
        return {
            "status": "ok",
            "server": "NeuroLoop Scoring",
            "version": "0.1.0",
            "plans_loaded": plan_count,
            "data_source": provider.data_source,
            "default_training_plan": settings.default_training_plan,
        }

    register_scoring_tools(
        server,
        provider,
        default_metric_value=settings.default_metric_value,
        default_training_plan=settings.default_training_plan,
    )
    logger.info("Scoring tools registered")

    register_plan_tools(server, registry)
    register_plan_resources(server, registry)
    register_cognition_prompts(server)

    return server


# Module-level instance for FastMCP discovery (fastmcp.json: "source": "...app.py", "entrypoint": "mcp").
# Lazy: only created when this module is loaded directly (not when tests import create_app).
def __getattr__(name: str):
    if name == "mcp":
        global mcp  # noqa: PLW0603
        mcp = create_app()
        return mcp
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
