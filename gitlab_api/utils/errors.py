"""Error creation helpers for the gitlab-api MCP server."""


def create_not_configured_error() -> dict[str, str]:
    """Create standardized error response for a missing server URL or token."""
    return {
        "error": "GitLab is not configured",
        "help": "Use configure_gitlab(server_url, private_token) or set GITLAB_URL and GITLAB_TOKEN",
    }


def create_invalid_id_error(kind: str, value: str) -> dict[str, str]:
    """Create standardized error response for a non-numeric ID in a resource URI."""
    return {
        "error": f"Invalid {kind} ID '{value}'",
        "help": f"{kind.capitalize()} IDs are numeric, e.g. gitlab://{kind}s/42",
    }
