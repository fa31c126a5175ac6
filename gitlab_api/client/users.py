"""User and session client mixin."""

import dataclasses
import logging
from typing import Self

from gitlab_api.client.base import BaseClientMixin
from gitlab_api.client.responses import decode_array, decode_object
from gitlab_api.config import ClientConfig
from gitlab_api.exceptions import AuthenticationError, NotFoundError, UserNotFoundError
from gitlab_api.models import Session, User

logger = logging.getLogger(__name__)


class UsersMixin(BaseClientMixin):
    """Mixin for user and session operations."""

    def open_session(self, login: str, password: str) -> Session:
        """Log in with user credentials.

        The request is sent without a private token since the session is what
        provides one.

        Args:
            login: Username or email address
            password: Password of the user

        Returns:
            The session, carrying the user's private token

        Raises:
            AuthenticationError: If the credentials were not accepted
            ConnectionFailureError: If the API could not be reached
        """
        fields = {"login": login, "password": password}
        try:
            logger.info(f"Opening session for '{login}' at {self.host}")
            response = self.requester.post("/session", fields, include_private_token=False)
        except UserNotFoundError:
            raise
        except NotFoundError as e:
            raise AuthenticationError("Could not open a session", status_code=e.status_code, response=e.response) from e
        return Session.from_json(decode_object(response))

    @classmethod
    def from_credentials(cls, login: str, password: str, config: ClientConfig | None = None) -> Self:
        """Create a client authenticated with the private token of a new session.

        Args:
            login: Username or email address
            password: Password of the user
            config: Connection settings, read from the environment if omitted

        Returns:
            A client using the session's private token
        """
        config = config if config is not None else ClientConfig.from_env()
        with cls(dataclasses.replace(config, private_token=None)) as anonymous:
            session = anonymous.open_session(login, password)
        return cls(dataclasses.replace(config, private_token=session.private_token))

    @classmethod
    def test_connection(cls, config: ClientConfig) -> None:
        """Test whether the API accepts the given settings.

        Raises:
            GitLabError: If the connection could not be established or the token was refused
        """
        with cls(config) as client:
            user = client.get_current_user()
        logger.info(f"Connected to GitLab at {config.host} as {user.username}")

    def get_current_user(self) -> User:
        """Get the user the private token belongs to.

        Raises:
            NotFoundError: If the API answered 404
            AuthenticationError: If the private token was refused
        """
        return User.from_json(decode_object(self.get("/user")))

    def get_user(self, user_id: int) -> User:
        """Get a specific user by ID.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        try:
            response = self.get(f"/users/{user_id}")
        except UserNotFoundError:
            raise
        except NotFoundError as e:
            raise UserNotFoundError(user_id, status_code=e.status_code, response=e.response) from e
        return User.from_json(decode_object(response))

    def get_users(self) -> list[User]:
        """Get all users of the GitLab instance.

        Raises:
            MalformedDataError: If any user in the response is malformed
        """
        return [User.from_json(item) for item in decode_array(self.get("/users"))]
