"""MCP Prompts: pre-built interaction templates for cognitive training reviews."""

from __future__ import annotations

from fastmcp import FastMCP


def register_cognition_prompts(mcp: FastMCP) -> None:
    """Register cognition domain MCP prompts."""

    @mcp.prompt()
    def weekly_cognitive_review_prompt(plan: str = "expert") -> str:
        """Prompt template for reviewing the week's Synthesized Cognitive Index."""
        return f"""Let's review my cognitive training week on the {plan} plan. Please:

1. Calculate my Synthesized Cognitive Index and explain its three components
2. Point out which weekly target (games, tasks, sessions, detox) is furthest behind
3. Check my cognitive readiness for today
4. Suggest one concrete adjustment for the rest of the week

Keep it short and practical."""
