"""Requests made on behalf of another user."""

import logging
import re

import httpx

from gitlab_api.client.requester import Fields, Requester
from gitlab_api.client.responses import HTTP_404_NOT_FOUND
from gitlab_api.exceptions import NotFoundError, UserNotFoundError

logger = logging.getLogger(__name__)

# GitLab's message when the sudo user does not exist
USER_NOT_FOUND_MESSAGE = re.compile(r"^404.* No user id or username for: .*")


def is_user_not_found(response: httpx.Response | None) -> bool:
    """Check whether a 404 response says the impersonated user does not exist."""
    if response is None or response.status_code != HTTP_404_NOT_FOUND:
        return False
    try:
        body = response.json()
    except ValueError:
        return False
    message = body.get("message") if isinstance(body, dict) else None
    return isinstance(message, str) and USER_NOT_FOUND_MESSAGE.fullmatch(message) is not None


class SudoRequester:
    """Wrap a requester, adding ``sudo=<user_id>`` to every request.

    Only administrators may impersonate other users. A 404 telling that the
    impersonated user does not exist is raised as :class:`UserNotFoundError`;
    every other outcome is left to the wrapped requester.
    """

    def __init__(self, wrapped: Requester, user_id: int):
        self.wrapped = wrapped
        self.user_id = user_id

    def _impersonate(self, fields: Fields | None) -> Fields:
        impersonated = dict(fields or {})
        impersonated["sudo"] = self.user_id
        return impersonated

    def _raise_if_user_not_found(self, error: NotFoundError) -> None:
        if is_user_not_found(error.response):
            logger.error(f"Impersonated user {self.user_id} does not exist")
            raise UserNotFoundError(self.user_id, status_code=error.status_code, response=error.response) from error

    def get(self, path: str, fields: Fields | None = None, include_private_token: bool = True) -> httpx.Response:
        try:
            return self.wrapped.get(path, self._impersonate(fields), include_private_token)
        except NotFoundError as e:
            self._raise_if_user_not_found(e)
            raise

    def post(self, path: str, fields: Fields | None = None, include_private_token: bool = True) -> httpx.Response:
        try:
            return self.wrapped.post(path, self._impersonate(fields), include_private_token)
        except NotFoundError as e:
            self._raise_if_user_not_found(e)
            raise
