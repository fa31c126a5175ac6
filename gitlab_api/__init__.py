"""Typed client for the GitLab REST API.

This package provides:
- A GitLab API client for sessions, users, groups and group members
- Impersonation of users by administrators
- Forward proxy support with per-host exclusions
- A configuration layer and FastMCP server exposing a shared client
"""

import logging

from gitlab_api.client import GitLabApiClient
from gitlab_api.config import ClientConfig, ProxyConfig, no_proxy_host_patterns
from gitlab_api.exceptions import (
    APIError,
    AuthenticationError,
    ConfigurationError,
    ConnectionFailureError,
    GitLabError,
    GroupNotFoundError,
    MalformedDataError,
    NotFoundError,
    UserNotFoundError,
)
from gitlab_api.models import AccessLevel, Group, GroupMember, Session, SessionUser, User

logging.getLogger("gitlab_api").addHandler(logging.NullHandler())

__all__ = [
    # Client
    "GitLabApiClient",
    # Configuration
    "ClientConfig",
    "ProxyConfig",
    "no_proxy_host_patterns",
    # Exceptions
    "GitLabError",
    "APIError",
    "ConnectionFailureError",
    "AuthenticationError",
    "NotFoundError",
    "GroupNotFoundError",
    "UserNotFoundError",
    "ConfigurationError",
    "MalformedDataError",
    # Models
    "AccessLevel",
    "User",
    "Session",
    "SessionUser",
    "Group",
    "GroupMember",
]
