"""MCP tool implementations, kept free of the FastMCP instance for testing."""

from planwright.tools.chat import chat
from planwright.tools.create_plan import create_plan

__all__ = ["chat", "create_plan"]
