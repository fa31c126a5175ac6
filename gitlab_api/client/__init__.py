"""GitLab API client composed from mixins."""

from gitlab_api.client.groups import GroupsMixin
from gitlab_api.client.users import UsersMixin


class GitLabApiClient(
    UsersMixin,
    GroupsMixin,
):
    """GitLab API client composed from mixins.

    This client provides methods for interacting with GitLab's API including:
    - Sessions (logging in with a username and password)
    - Users
    - Groups and group members
    - Impersonation of other users (``as_user``)
    """


__all__ = ["GitLabApiClient"]
