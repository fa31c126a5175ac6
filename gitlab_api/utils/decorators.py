"""Decorators for gitlab-api tools and resources."""

import functools
from collections.abc import Callable
from typing import Any, TypeVar

from gitlab_api.exceptions import APIError, GitLabError, MalformedDataError

# Maximum length for error details in responses
MAX_ERROR_DETAIL_LENGTH = 500

F = TypeVar("F", bound=Callable[..., Any])


def handle_gitlab_errors(operation: str) -> Callable[[F], F]:
    """Decorator to handle common GitLab API errors in tool and resource functions.

    Args:
        operation: Description of the operation for error messages (e.g., "fetch group", "list users")

    Returns:
        Decorated function that catches GitLab errors and returns standardized error responses
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)
            except APIError as e:
                error: dict[str, Any] = {
                    "success": False,
                    "error": f"Failed to {operation}: {str(e)[:MAX_ERROR_DETAIL_LENGTH]}",
                }
                if e.status_code is not None:
                    error["status_code"] = e.status_code
                return error
            except GitLabError as e:
                return {
                    "success": False,
                    "error": f"Failed to {operation}: {str(e)[:MAX_ERROR_DETAIL_LENGTH]}",
                }
            except MalformedDataError as e:
                return {
                    "success": False,
                    "error": f"Unexpected response while trying to {operation}: {str(e)[:MAX_ERROR_DETAIL_LENGTH]}",
                }

        return wrapper  # type: ignore[return-value]

    return decorator
