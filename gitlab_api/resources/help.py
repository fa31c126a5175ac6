"""Help resource for the gitlab-api MCP server."""

from typing import Any

from gitlab_api.server import configuration, mcp


@mcp.resource(
    "gitlab://help/",
    name="GitLab API Help",
    description="Quick reference for available GitLab resources and tools",
    mime_type="application/json",
)
def gitlab_help() -> dict[str, Any]:
    """Get help information about available GitLab resources"""
    return {
        "server": "gitlab-api",
        "configured": configuration.is_api_configured(),
        "server_url": configuration.server_url,
        "available_resources": {
            "current_user": {
                "uri": "gitlab://user",
                "description": "The user owning the configured private token",
            },
            "users": {
                "uri": "gitlab://users/",
                "description": "All users (requires an administrator token)",
            },
            "user": {
                "uri": "gitlab://users/{user_id}",
                "examples": ["gitlab://users/42"],
                "description": "A specific user",
            },
            "groups": {
                "uri": "gitlab://groups/",
                "description": "Groups visible to the configured user",
            },
            "group": {
                "uri": "gitlab://groups/{group_id}",
                "examples": ["gitlab://groups/7"],
                "description": "A specific group",
            },
            "group_members": {
                "uri": "gitlab://groups/{group_id}/members",
                "examples": ["gitlab://groups/7/members"],
                "description": "Group members with access levels (Guest, Reporter, Developer, Master, Owner)",
            },
        },
        "available_tools": {
            "configure_gitlab": "Store the GitLab server URL and private token",
            "test_gitlab_connection": "Check a server URL and private token without storing them",
        },
    }
