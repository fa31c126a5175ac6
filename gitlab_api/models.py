"""Entities returned by the GitLab API client.

Every entity is built with ``from_json`` from a decoded JSON object. A missing
or mistyped field raises :class:`~gitlab_api.exceptions.MalformedDataError`;
no field ever falls back to a default except the optional ``is_admin`` flag.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import IntEnum
from typing import Any

from gitlab_api.exceptions import MalformedDataError

# GitLab formats dates as e.g. 2014-09-24T12:59:30.123Z
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"


class AccessLevel(IntEnum):
    """Access level of a member in a group."""

    NONE = 0
    GUEST = 10
    REPORTER = 20
    DEVELOPER = 30
    MASTER = 40
    OWNER = 50

    @property
    def label(self) -> str:
        return self.name.capitalize()

    def __str__(self) -> str:
        return self.label

    @classmethod
    def for_id(cls, level_id: Any) -> "AccessLevel":
        """Look up the access level for a GitLab access level ID.

        Raises:
            MalformedDataError: If the ID is not one of the known levels
        """
        if isinstance(level_id, int) and not isinstance(level_id, bool):
            for level in cls:
                if level.value == level_id:
                    return level
        raise MalformedDataError(f"Invalid access level ID: {level_id!r}")


def _field(data: Any, key: str, kind: type) -> Any:
    if not isinstance(data, dict):
        raise MalformedDataError(f"Malformed JSON object: expected an object, got {type(data).__name__}")
    if key not in data:
        raise MalformedDataError(f"Malformed JSON object: missing field '{key}'")
    value = data[key]
    # bool is a subclass of int, but never a valid ID
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise MalformedDataError(f"Malformed JSON object: field '{key}' is not of type {kind.__name__}")
    return value


def _parse_date(data: dict[str, Any], key: str) -> datetime:
    value = _field(data, key, str)
    try:
        return datetime.strptime(value, DATE_FORMAT).replace(tzinfo=timezone.utc)
    except ValueError as e:
        raise MalformedDataError(f"Malformed date in field '{key}': {value}") from e


def _parse_active(data: dict[str, Any]) -> bool:
    # session objects use "blocked", user objects use "state"
    if "blocked" in data:
        return not _field(data, "blocked", bool)
    return _field(data, "state", str) == "active"


@dataclass(frozen=True)
class User:
    """A GitLab user account."""

    id: int
    username: str
    email: str
    name: str
    created_at: datetime
    is_active: bool
    is_admin: bool = False

    @property
    def is_blocked(self) -> bool:
        return not self.is_active

    def __str__(self) -> str:
        return self.name

    @classmethod
    def from_json(cls, data: Any) -> "User":
        is_admin = _field(data, "is_admin", bool) if isinstance(data, dict) and "is_admin" in data else False
        return cls(
            id=_field(data, "id", int),
            username=_field(data, "username", str),
            email=_field(data, "email", str),
            name=_field(data, "name", str),
            created_at=_parse_date(data, "created_at"),
            is_active=_parse_active(data),
            is_admin=is_admin,
        )


@dataclass(frozen=True)
class SessionUser:
    """The user a session was opened for, as described by the session object."""

    id: int
    username: str
    email: str
    name: str
    is_active: bool

    @property
    def is_blocked(self) -> bool:
        return not self.is_active

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Session:
    """Result of logging in with a username and password."""

    private_token: str
    user: SessionUser

    @property
    def id(self) -> int:
        return self.user.id

    @property
    def username(self) -> str:
        return self.user.username

    @property
    def email(self) -> str:
        return self.user.email

    @property
    def name(self) -> str:
        return self.user.name

    @property
    def is_blocked(self) -> bool:
        return self.user.is_blocked

    @classmethod
    def from_json(cls, data: Any) -> "Session":
        private_token = _field(data, "private_token", str)
        user = SessionUser(
            id=_field(data, "id", int),
            username=_field(data, "username", str),
            email=_field(data, "email", str),
            name=_field(data, "name", str),
            is_active=_parse_active(data),
        )
        return cls(private_token=private_token, user=user)


@dataclass(frozen=True)
class Group:
    """A GitLab group."""

    id: int
    name: str
    path: str

    def __str__(self) -> str:
        return self.name

    @classmethod
    def from_json(cls, data: Any) -> "Group":
        return cls(
            id=_field(data, "id", int),
            name=_field(data, "name", str),
            path=_field(data, "path", str),
        )


@dataclass(frozen=True)
class GroupMember(User):
    """A user's membership in a group.

    The member payload does not carry the group, so the group ID is supplied
    by the caller.
    """

    group_id: int = 0
    access_level: AccessLevel = AccessLevel.NONE

    @classmethod
    def from_json(cls, data: Any, group_id: int) -> "GroupMember":  # type: ignore[override]
        user = User.from_json(data)
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            name=user.name,
            created_at=user.created_at,
            is_active=_field(data, "state", str) == "active",
            is_admin=user.is_admin,
            group_id=group_id,
            access_level=AccessLevel.for_id(_field(data, "access_level", int)),
        )
