"""MCP Resources for training plan discovery."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from fastmcp import FastMCP

if TYPE_CHECKING:
    from neuroloop.domains.cognition.domain_logic.plan_catalog import PlanRegistry


def register_plan_resources(mcp: FastMCP, registry: PlanRegistry) -> None:
    """Register the training plan catalogue resource on the MCP server."""

    @mcp.resource("plans://training/catalog")
    def training_plan_catalog_resource() -> str:
        """The full training plan catalogue, including session configurations."""
        return json.dumps(
            {
                "plan_count": len(registry),
                "plans": [p.to_dict() for p in registry.all()],
            },
            indent=2,
        )
