"""User resources for the gitlab-api MCP server."""

from typing import Any

from gitlab_api.server import configuration, mcp
from gitlab_api.utils.decorators import handle_gitlab_errors
from gitlab_api.utils.errors import create_invalid_id_error, create_not_configured_error
from gitlab_api.utils.serializers import serialize_user


@mcp.resource("gitlab://user")
@handle_gitlab_errors("fetch the current user")
async def current_user() -> dict[str, Any]:
    """Get the user owning the configured private token"""
    if not configuration.is_api_configured():
        return create_not_configured_error()
    return serialize_user(configuration.get_client().get_current_user())


@mcp.resource("gitlab://users/")
@handle_gitlab_errors("list users")
async def all_users() -> list[dict[str, Any]] | dict[str, Any]:
    """Get all users of the GitLab server (requires an administrator token)"""
    if not configuration.is_api_configured():
        return create_not_configured_error()
    return [serialize_user(user) for user in configuration.get_client().get_users()]


@mcp.resource("gitlab://users/{user_id}")
@handle_gitlab_errors("fetch user")
async def user(user_id: str) -> dict[str, Any]:
    """Get a specific user by ID"""
    if not user_id.isdigit():
        return create_invalid_id_error("user", user_id)
    if not configuration.is_api_configured():
        return create_not_configured_error()
    return serialize_user(configuration.get_client().get_user(int(user_id)))
