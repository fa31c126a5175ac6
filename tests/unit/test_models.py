"""Unit tests for API entities."""

from datetime import datetime, timezone
from typing import Any

import pytest

from gitlab_api.exceptions import MalformedDataError
from gitlab_api.models import AccessLevel, Group, GroupMember, Session, User


class TestAccessLevel:
    """Tests for AccessLevel."""

    @pytest.mark.parametrize(
        ("level_id", "label"),
        [(0, "None"), (10, "Guest"), (20, "Reporter"), (30, "Developer"), (40, "Master"), (50, "Owner")],
    )
    def test_for_id(self, level_id: int, label: str) -> None:
        level = AccessLevel.for_id(level_id)
        assert level.value == level_id
        assert level.label == label
        assert str(level) == label

    @pytest.mark.parametrize("level_id", [-1, 5, 35, 60, True, "30", None, 30.0])
    def test_invalid_id(self, level_id: Any) -> None:
        """Test that unknown or mistyped IDs are rejected."""
        with pytest.raises(MalformedDataError, match="Invalid access level ID"):
            AccessLevel.for_id(level_id)

    def test_ordering(self) -> None:
        assert AccessLevel.GUEST < AccessLevel.DEVELOPER < AccessLevel.OWNER


class TestUser:
    """Tests for User.from_json."""

    def test_from_json(self, sample_user: dict) -> None:
        user = User.from_json(sample_user)

        assert user.id == 1
        assert user.username == "bob"
        assert user.created_at == datetime(2014, 9, 24, 12, 59, 30, 123000, tzinfo=timezone.utc)
        assert user.is_active is True
        assert user.is_blocked is False
        assert str(user) == "Bob"

    def test_blocked_state(self, sample_user: dict) -> None:
        """Test that any state but active means blocked."""
        user = User.from_json({**sample_user, "state": "blocked"})

        assert user.is_active is False
        assert user.is_blocked is True

    def test_is_admin_defaults_to_false(self, sample_user: dict) -> None:
        data = {key: value for key, value in sample_user.items() if key != "is_admin"}
        assert User.from_json(data).is_admin is False

    @pytest.mark.parametrize("key", ["id", "username", "email", "name", "created_at", "state"])
    def test_missing_field(self, sample_user: dict, key: str) -> None:
        data = {k: v for k, v in sample_user.items() if k != key}

        with pytest.raises(MalformedDataError, match=key):
            User.from_json(data)

    @pytest.mark.parametrize(
        ("key", "value"),
        [("id", "1"), ("id", True), ("id", 1.0), ("username", 5), ("email", None), ("is_admin", "yes")],
    )
    def test_mistyped_field(self, sample_user: dict, key: str, value: Any) -> None:
        with pytest.raises(MalformedDataError, match=key):
            User.from_json({**sample_user, key: value})

    @pytest.mark.parametrize("created_at", ["2014-09-24", "2014-09-24T12:59:30Z", "yesterday"])
    def test_malformed_date(self, sample_user: dict, created_at: str) -> None:
        with pytest.raises(MalformedDataError, match="date"):
            User.from_json({**sample_user, "created_at": created_at})

    def test_not_an_object(self) -> None:
        with pytest.raises(MalformedDataError, match="expected an object"):
            User.from_json([])

    def test_malformed_data_is_value_error(self) -> None:
        """Test that malformed data can be caught as a ValueError."""
        with pytest.raises(ValueError):
            User.from_json({})


class TestSession:
    """Tests for Session.from_json."""

    def test_from_json(self, sample_session: dict) -> None:
        session = Session.from_json(sample_session)

        assert session.private_token == "abc123"
        assert session.id == 1
        assert session.username == "bob"
        assert session.email == "bob@x.com"
        assert session.name == "Bob"
        assert session.is_blocked is False
        assert session.user.is_active is True

    def test_blocked(self, sample_session: dict) -> None:
        assert Session.from_json({**sample_session, "blocked": True}).is_blocked is True

    def test_state_when_blocked_is_absent(self, sample_session: dict) -> None:
        """Test that the state field is used when the session has no blocked flag."""
        data = {key: value for key, value in sample_session.items() if key != "blocked"}

        assert Session.from_json({**data, "state": "blocked"}).is_blocked is True
        assert Session.from_json({**data, "state": "active"}).is_blocked is False

    def test_missing_private_token(self, sample_session: dict) -> None:
        data = {key: value for key, value in sample_session.items() if key != "private_token"}

        with pytest.raises(MalformedDataError, match="private_token"):
            Session.from_json(data)

    def test_mistyped_blocked(self, sample_session: dict) -> None:
        with pytest.raises(MalformedDataError, match="blocked"):
            Session.from_json({**sample_session, "blocked": "no"})


class TestGroup:
    """Tests for Group and GroupMember."""

    def test_group_from_json(self, sample_group: dict) -> None:
        assert Group.from_json(sample_group) == Group(id=7, name="Developers", path="developers")

    def test_group_missing_path(self) -> None:
        with pytest.raises(MalformedDataError, match="path"):
            Group.from_json({"id": 7, "name": "Developers"})

    def test_member_from_json(self, sample_member: dict) -> None:
        member = GroupMember.from_json(sample_member, 7)

        assert member.group_id == 7
        assert member.access_level is AccessLevel.DEVELOPER
        assert member.username == "alice"
        assert member.is_active is True
        assert isinstance(member, User)

    def test_member_state(self, sample_member: dict) -> None:
        member = GroupMember.from_json({**sample_member, "state": "blocked"}, 7)
        assert member.is_blocked is True

    def test_member_missing_access_level(self, sample_member: dict) -> None:
        data = {key: value for key, value in sample_member.items() if key != "access_level"}

        with pytest.raises(MalformedDataError, match="access_level"):
            GroupMember.from_json(data, 7)
