"""HTTP handlers."""

from tool_agent.handlers.tools_handler import setup_routes

__all__ = ["setup_routes"]
