"""Connection setup tools for the gitlab-api MCP server."""

from typing import Any

from gitlab_api.server import configuration, mcp


@mcp.tool()
async def test_gitlab_connection(server_url: str, private_token: str) -> dict[str, Any]:
    """Test whether a GitLab server accepts a private token

    Args:
        server_url: URL of the GitLab server (e.g., "https://gitlab.example.com")
        private_token: Private token of a GitLab user

    Returns:
        Result with success status and a message telling whether the host was
        unreachable or refused the token
    """
    check = configuration.check_connection(server_url, private_token)
    return {"success": check.ok, "message": check.message}


@mcp.tool()
async def configure_gitlab(server_url: str, private_token: str) -> dict[str, Any]:
    """Store the GitLab server URL and private token

    The settings are tested first and only stored if the connection succeeds.

    Args:
        server_url: URL of the GitLab server (e.g., "https://gitlab.example.com")
        private_token: Private token of a GitLab user

    Returns:
        Result with success status and the connection test message
    """
    check = configuration.check_connection(server_url, private_token)
    if not check.ok:
        return {"success": False, "error": check.message}

    configuration.configure({"serverUrl": server_url, "privateToken": private_token})
    return {"success": True, "message": check.message, "server_url": configuration.server_url}
