"""Shared test fixtures for gitlab-api tests."""

import os
from collections.abc import Generator
from typing import Any
from unittest.mock import patch
from urllib.parse import parse_qsl

import httpx
import pytest

from gitlab_api.client import GitLabApiClient
from gitlab_api.config import ClientConfig

GITLAB_URL = "https://gitlab.example.com"
GITLAB_TOKEN = "test-token-12345"


class FakeGitLab:
    """Answer requests from canned responses and record what was sent.

    Unknown paths get GitLab's generic 404 body.
    """

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], httpx.Response] = {}
        self.requests: list[httpx.Request] = []

    def add(self, method: str, path: str, status_code: int, json: Any = None, text: str | None = None) -> None:
        if text is not None:
            self.routes[(method, "/api/v3" + path)] = httpx.Response(status_code, text=text)
        else:
            self.routes[(method, "/api/v3" + path)] = httpx.Response(status_code, json=json)

    def handler(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        response = self.routes.get((request.method, request.url.path))
        if response is None:
            return httpx.Response(404, json={"message": "404 Not found"})
        return httpx.Response(response.status_code, content=response.content, headers=response.headers)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_params(self) -> dict[str, str]:
        return dict(self.last_request.url.params)

    def last_form(self) -> dict[str, str]:
        return dict(parse_qsl(self.last_request.content.decode()))


@pytest.fixture
def mock_env_vars() -> Generator[dict[str, str], None, None]:
    """Set up test environment variables without any proxy settings."""
    env = {
        "GITLAB_TOKEN": GITLAB_TOKEN,
        "GITLAB_URL": GITLAB_URL,
    }
    with patch.dict(os.environ, env, clear=True):
        yield env


@pytest.fixture
def fake_gitlab() -> FakeGitLab:
    return FakeGitLab()


@pytest.fixture
def client_config() -> ClientConfig:
    return ClientConfig(host=GITLAB_URL, private_token=GITLAB_TOKEN)


@pytest.fixture
def client(client_config: ClientConfig, fake_gitlab: FakeGitLab) -> Generator[GitLabApiClient, None, None]:
    """GitLabApiClient answering from the fake GitLab server."""
    with GitLabApiClient(client_config, transport=fake_gitlab.transport) as api_client:
        yield api_client


@pytest.fixture
def sample_user() -> dict[str, Any]:
    """Sample GitLab user response."""
    return {
        "id": 1,
        "username": "bob",
        "email": "bob@example.com",
        "name": "Bob",
        "created_at": "2014-09-24T12:59:30.123Z",
        "state": "active",
        "is_admin": False,
    }


@pytest.fixture
def sample_admin() -> dict[str, Any]:
    """Sample GitLab administrator response."""
    return {
        "id": 2,
        "username": "root",
        "email": "root@example.com",
        "name": "Administrator",
        "created_at": "2014-01-02T03:04:05.000Z",
        "state": "active",
        "is_admin": True,
    }


@pytest.fixture
def sample_session() -> dict[str, Any]:
    """Sample GitLab session response."""
    return {
        "id": 1,
        "username": "bob",
        "email": "bob@x.com",
        "name": "Bob",
        "private_token": "abc123",
        "blocked": False,
    }


@pytest.fixture
def sample_group() -> dict[str, Any]:
    """Sample GitLab group response."""
    return {"id": 7, "name": "Developers", "path": "developers"}


@pytest.fixture
def sample_member() -> dict[str, Any]:
    """Sample GitLab group member response."""
    return {
        "id": 3,
        "username": "alice",
        "email": "alice@example.com",
        "name": "Alice",
        "created_at": "2015-05-06T07:08:09.010Z",
        "access_level": 30,
        "state": "active",
    }


# Integration test fixtures


@pytest.fixture
def gitlab_token() -> str | None:
    """Get GitLab token from environment for integration tests."""
    return os.getenv("GITLAB_TOKEN")


@pytest.fixture
def gitlab_url() -> str:
    """Get GitLab URL from environment for integration tests."""
    return os.getenv("GITLAB_URL", "https://gitlab.com")


@pytest.fixture
def skip_without_token(gitlab_token: str | None) -> None:
    """Skip test if GITLAB_TOKEN is not set."""
    if not gitlab_token:
        pytest.skip("GITLAB_TOKEN not set - skipping integration test")
