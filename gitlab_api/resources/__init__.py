"""Resources registration for the gitlab-api MCP server.

This module imports all resource modules for side-effect registration with FastMCP.
"""

from gitlab_api.resources import groups, users
from gitlab_api.resources import help as help_resource

__all__ = [
    "help_resource",
    "users",
    "groups",
]
