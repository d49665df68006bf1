"""
MCP Server for Intervals.icu

Exposes an Intervals.icu athlete's profile, activities, wellness data,
workout library and calendar as tools via the Model Context Protocol (MCP).

Calendar safety: events that start in the past cannot be created,
modified or deleted through this server.

Supports two transport modes:
- stdio: For local usage from an MCP client (default)
- http: For HTTP server deployment
"""

from fastmcp import FastMCP

from intervals_mcp import profile
from intervals_mcp import activities
from intervals_mcp import wellness
from intervals_mcp import workouts
from intervals_mcp import events

__version__ = "1.0.0"


def create_app() -> FastMCP:
    """Create and configure the MCP app with all tools registered."""
    app = FastMCP("intervals-mcp")

    app = profile.register_tools(app)
    app = activities.register_tools(app)
    app = wellness.register_tools(app)
    app = workouts.register_tools(app)
    app = events.register_tools(app)

    return app


def main():
    """Run the MCP server (see intervals_mcp.__main__ for the CLI)."""
    from intervals_mcp.__main__ import main as cli_main

    cli_main()
