"""Classification and decoding of GitLab API responses."""

import logging
from typing import Any

import httpx

from gitlab_api.exceptions import AuthenticationError, MalformedDataError, NotFoundError

logger = logging.getLogger(__name__)

HTTP_200_OK = 200
HTTP_201_CREATED = 201
HTTP_404_NOT_FOUND = 404


class ResponseClassifier:
    """Map a response status to success, not found or authentication failure.

    Any status other than the expected one or 404 is reported as an
    authentication failure, whether it is a 401, a 403 or a 500.
    """

    def __init__(self, expected_status: int):
        self.expected_status = expected_status

    def classify(self, response: httpx.Response) -> httpx.Response:
        """Return the response if it succeeded.

        Raises:
            NotFoundError: If the status is 404
            AuthenticationError: For any other unexpected status
        """
        status_code = response.status_code
        if status_code == self.expected_status:
            return response

        logger.error(f"GitLab API error for {response.request.method} {response.request.url.path}: {status_code}")
        if status_code == HTTP_404_NOT_FOUND:
            raise NotFoundError("Resource not found", status_code=status_code, response=response)
        raise AuthenticationError("Invalid private token", status_code=status_code, response=response)


GET_CLASSIFIER = ResponseClassifier(HTTP_200_OK)
POST_CLASSIFIER = ResponseClassifier(HTTP_201_CREATED)


def decode_json(response: httpx.Response) -> Any:
    """Decode a JSON response body.

    Raises:
        MalformedDataError: If the body is not valid JSON
    """
    try:
        return response.json()
    except ValueError as e:
        raise MalformedDataError(f"Malformed JSON in response: {response.text[:200]}") from e


def decode_object(response: httpx.Response) -> dict[str, Any]:
    """Decode a response body holding a single JSON object."""
    data = decode_json(response)
    if not isinstance(data, dict):
        raise MalformedDataError(f"Expected a JSON object, got {type(data).__name__}")
    return data


def decode_array(response: httpx.Response) -> list[Any]:
    """Decode a response body holding a JSON array."""
    data = decode_json(response)
    if not isinstance(data, list):
        raise MalformedDataError(f"Expected a JSON array, got {type(data).__name__}")
    return data
