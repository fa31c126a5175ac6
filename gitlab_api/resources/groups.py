"""Group resources for the gitlab-api MCP server."""

from typing import Any

from gitlab_api.server import configuration, mcp
from gitlab_api.utils.decorators import handle_gitlab_errors
from gitlab_api.utils.errors import create_invalid_id_error, create_not_configured_error
from gitlab_api.utils.serializers import serialize_group, serialize_member


@mcp.resource("gitlab://groups/")
@handle_gitlab_errors("list groups")
async def all_groups() -> list[dict[str, Any]] | dict[str, Any]:
    """Get the groups visible to the configured user

    Administrators see every group, other users only the groups they belong to.
    """
    if not configuration.is_api_configured():
        return create_not_configured_error()
    return [serialize_group(group) for group in configuration.get_client().get_groups()]


@mcp.resource("gitlab://groups/{group_id}")
@handle_gitlab_errors("fetch group")
async def group(group_id: str) -> dict[str, Any]:
    """Get a specific group by ID"""
    if not group_id.isdigit():
        return create_invalid_id_error("group", group_id)
    if not configuration.is_api_configured():
        return create_not_configured_error()
    return serialize_group(configuration.get_client().get_group(int(group_id)))


@mcp.resource("gitlab://groups/{group_id}/members")
@handle_gitlab_errors("list group members")
async def group_members(group_id: str) -> list[dict[str, Any]] | dict[str, Any]:
    """Get the members of a group with their access levels"""
    if not group_id.isdigit():
        return create_invalid_id_error("group", group_id)
    if not configuration.is_api_configured():
        return create_not_configured_error()
    return [serialize_member(member) for member in configuration.get_client().get_group_members(int(group_id))]
