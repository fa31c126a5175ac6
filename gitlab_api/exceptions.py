"""Exception hierarchy for gitlab-api-client.

Everything the client raises on purpose derives from :class:`GitLabError`,
except :class:`MalformedDataError` which signals bad input data rather than a
failed request.
"""

from typing import Any

import httpx


class GitLabError(Exception):
    """Base exception for all GitLab client errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigurationError(GitLabError):
    """Raised when the client configuration is missing or invalid."""


class APIError(GitLabError):
    """Raised when a request to the GitLab API fails.

    Attributes:
        status_code: HTTP status code, or None if the server was never reached
        response: The HTTP response, or None if the server was never reached
    """

    def __init__(self, message: str, status_code: int | None = None, response: httpx.Response | None = None):
        self.status_code = status_code
        self.response = response
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, status_code={self.status_code})"


class ConnectionFailureError(APIError):
    """Raised when the API could not be reached (DNS, refused connection, TLS, timeout)."""


class AuthenticationError(APIError):
    """Raised when the server answers with anything but the expected status or 404."""


class NotFoundError(APIError):
    """Raised when the requested resource does not exist."""


class GroupNotFoundError(NotFoundError):
    """Raised when a group with a given ID does not exist."""

    def __init__(self, group_id: int, **kwargs: Any):
        self.group_id = group_id
        super().__init__(f"A group with group ID {group_id} does not exist", **kwargs)


class UserNotFoundError(NotFoundError):
    """Raised when a user with a given ID does not exist."""

    def __init__(self, user_id: int, **kwargs: Any):
        self.user_id = user_id
        super().__init__(f"A user with user ID {user_id} does not exist", **kwargs)


class MalformedDataError(ValueError):
    """Raised when a response body is not the JSON the client expects."""
