"""Utility functions for the gitlab-api MCP server."""

from gitlab_api.utils.decorators import MAX_ERROR_DETAIL_LENGTH, handle_gitlab_errors
from gitlab_api.utils.errors import create_invalid_id_error, create_not_configured_error
from gitlab_api.utils.serializers import serialize_group, serialize_member, serialize_user

__all__ = [
    # decorators
    "handle_gitlab_errors",
    "MAX_ERROR_DETAIL_LENGTH",
    # errors
    "create_not_configured_error",
    "create_invalid_id_error",
    # serializers
    "serialize_user",
    "serialize_group",
    "serialize_member",
]
