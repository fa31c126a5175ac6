"""Convert client entities into JSON-safe dictionaries."""

from typing import Any

from gitlab_api.models import Group, GroupMember, User


def serialize_user(user: User) -> dict[str, Any]:
    return {
        "id": user.id,
        "username": user.username,
        "email": user.email,
        "name": user.name,
        "created_at": user.created_at.isoformat(),
        "is_active": user.is_active,
        "is_blocked": user.is_blocked,
        "is_admin": user.is_admin,
    }


def serialize_group(group: Group) -> dict[str, Any]:
    return {"id": group.id, "name": group.name, "path": group.path}


def serialize_member(member: GroupMember) -> dict[str, Any]:
    """Serialize a group member, with the access level as both ID and name."""
    data = serialize_user(member)
    data["group_id"] = member.group_id
    data["access_level"] = {"id": member.access_level.value, "name": member.access_level.label}
    return data
