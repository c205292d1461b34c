# planwright/server.py
"""
FastMCP server instance with tool registration.

CRITICAL: configure_logging() is called first to prevent stdout pollution.
All logging goes to stderr as JSON.
"""

# Configure logging FIRST before any other imports
from planwright.logging_config import configure_logging

configure_logging()

# Now safe to import everything else
import logging

from fastmcp import FastMCP

from planwright.config.loader import load_config
from planwright.planning import ChatOrchestrator, PlanningOrchestrator, create_orchestrators
from planwright.tools.chat import chat as _chat
from planwright.tools.create_plan import create_plan as _create_plan

logger = logging.getLogger(__name__)

# Create FastMCP instance
mcp = FastMCP("planwright")

# Load configuration
_config = load_config()
logger.info(f"Loaded configuration: provider={_config.provider}, model={_config.active_model}")

# Built on first tool call
_orchestrators: tuple[PlanningOrchestrator, ChatOrchestrator] | None = None


def get_orchestrators() -> tuple[PlanningOrchestrator, ChatOrchestrator]:
    global _orchestrators
    if _orchestrators is None:
        _orchestrators = create_orchestrators(_config)
    return _orchestrators


@mcp.tool()
async def create_plan(
    messages: list[dict] | None = None,
    description: str | None = None,
) -> dict:
    """Create a technical plan (research, component analysis, synthesis) with web search."""
    planner, _ = get_orchestrators()
    return await _create_plan(messages, description, planner=planner)


@mcp.tool()
async def chat(messages: list[dict]) -> dict:
    """Chat about a technical idea. Single LLM reply, no web search."""
    _, orchestrator = get_orchestrators()
    return await _chat(messages, orchestrator=orchestrator)


logger.info("MCP server initialized with 2 tools")
