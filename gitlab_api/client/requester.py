"""Authenticated GET and POST requests against the GitLab API."""

import logging
from typing import Any, Protocol

import httpx

from gitlab_api.client.responses import GET_CLASSIFIER, POST_CLASSIFIER
from gitlab_api.exceptions import ConnectionFailureError

logger = logging.getLogger(__name__)

Fields = dict[str, Any]


class Requester(Protocol):
    """Something that can make GET and POST requests to the API."""

    def get(self, path: str, fields: Fields | None = None, include_private_token: bool = True) -> httpx.Response: ...

    def post(self, path: str, fields: Fields | None = None, include_private_token: bool = True) -> httpx.Response: ...


class HttpRequester:
    """Build requests, send them over an httpx client and classify the responses.

    GET fields are sent as query parameters and POST fields as a form body.
    The private token is merged into the fields last, so it replaces any
    caller-supplied ``private_token`` field.
    """

    def __init__(self, http_client: httpx.Client, private_token: str | None):
        self.http_client = http_client
        self.private_token = private_token

    def _merge_fields(self, fields: Fields | None, include_private_token: bool) -> Fields:
        merged = dict(fields or {})
        if include_private_token and self.private_token is not None:
            merged["private_token"] = self.private_token
        return merged

    def get(self, path: str, fields: Fields | None = None, include_private_token: bool = True) -> httpx.Response:
        """GET request to GitLab API, expecting 200 OK."""
        params = self._merge_fields(fields, include_private_token)
        try:
            logger.debug(f"GET {path} with fields={sorted(k for k in params if k != 'private_token')}")
            response = self.http_client.get(path, params=params)
        except httpx.RequestError as e:
            logger.error(f"Network error for GET {path}: {e}")
            raise ConnectionFailureError("Could not connect to API") from e
        return GET_CLASSIFIER.classify(response)

    def post(self, path: str, fields: Fields | None = None, include_private_token: bool = True) -> httpx.Response:
        """POST request to GitLab API, expecting 201 Created."""
        data = self._merge_fields(fields, include_private_token)
        try:
            logger.debug(f"POST {path} with fields={sorted(k for k in data if k != 'private_token')}")
            response = self.http_client.post(path, data=data)
        except httpx.RequestError as e:
            logger.error(f"Network error for POST {path}: {e}")
            raise ConnectionFailureError("Could not connect to API") from e
        return POST_CLASSIFIER.classify(response)
