"""Tools registration for the gitlab-api MCP server.

This module imports all tool modules for side-effect registration with FastMCP.
"""

from gitlab_api.tools import connection

__all__ = [
    "connection",
]
