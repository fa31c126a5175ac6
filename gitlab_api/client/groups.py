"""Group client mixin."""

import logging

from gitlab_api.client.base import BaseClientMixin
from gitlab_api.client.responses import decode_array, decode_object
from gitlab_api.exceptions import GroupNotFoundError, NotFoundError, UserNotFoundError
from gitlab_api.models import Group, GroupMember

logger = logging.getLogger(__name__)


class GroupsMixin(BaseClientMixin):
    """Mixin for group operations."""

    def get_groups(self) -> list[Group]:
        """Get the groups visible to the authenticated user.

        Administrators see all groups, other users only the groups they are members of.
        """
        return [Group.from_json(item) for item in decode_array(self.get("/groups"))]

    def get_group(self, group_id: int) -> Group:
        """Get a specific group by ID.

        Raises:
            GroupNotFoundError: If the group does not exist
        """
        try:
            response = self.get(f"/groups/{group_id}")
        except UserNotFoundError:
            raise
        except NotFoundError as e:
            raise GroupNotFoundError(group_id, status_code=e.status_code, response=e.response) from e
        return Group.from_json(decode_object(response))

    def get_group_members(self, group_id: int) -> list[GroupMember]:
        """Get the members of a group.

        Raises:
            GroupNotFoundError: If the group does not exist
        """
        try:
            response = self.get(f"/groups/{group_id}/members")
        except UserNotFoundError:
            raise
        except NotFoundError as e:
            raise GroupNotFoundError(group_id, status_code=e.status_code, response=e.response) from e
        members = [GroupMember.from_json(item, group_id) for item in decode_array(response)]
        logger.debug(f"Group {group_id} has {len(members)} members")
        return members
