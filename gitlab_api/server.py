"""GitLab API MCP Server entry point."""

import logging

from fastmcp import FastMCP

from gitlab_api.configuration import get_configuration

# Create FastMCP server with instructions
mcp = FastMCP(
    "gitlab-api",
    instructions="""
This server exposes the users and groups of a configured GitLab server.

SETUP:
- configure_gitlab(server_url, private_token) - Store the GitLab server URL and private token
- test_gitlab_connection(server_url, private_token) - Check settings before storing them

RESOURCES:
- gitlab://user - The user owning the configured private token
- gitlab://users/ - All users (administrators only)
- gitlab://users/{user_id} - A specific user
- gitlab://groups/ - Groups visible to the configured user
- gitlab://groups/{group_id} - A specific group
- gitlab://groups/{group_id}/members - Members of a group with their access levels
- gitlab://help/ - This overview

Proxy settings are read from GITLAB_PROXY_HOST, GITLAB_PROXY_PORT, GITLAB_PROXY_USER,
GITLAB_PROXY_PASSWORD and GITLAB_NO_PROXY_HOSTS.
""",
)

# Process-wide configuration; the client is created on first use
configuration = get_configuration()

# Import resources and tools for side-effect registration
# These modules use @mcp.resource() and @mcp.tool() decorators
from gitlab_api import resources, tools  # noqa: F401, E402


def main() -> None:
    """Run the GitLab API MCP server."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    mcp.run()


if __name__ == "__main__":
    main()
