"""Stored GitLab connection settings and the shared API client built from them."""

import logging
import os
import threading
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

from dotenv import load_dotenv, set_key

from gitlab_api.client import GitLabApiClient
from gitlab_api.config import ClientConfig, ProxyConfig, proxy_from_env
from gitlab_api.exceptions import AuthenticationError, ConfigurationError, GitLabError, MalformedDataError

logger = logging.getLogger(__name__)

SERVER_URL_KEY = "GITLAB_URL"
PRIVATE_TOKEN_KEY = "GITLAB_TOKEN"

CONNECTION_ESTABLISHED = "Success: Connection established"
TOKEN_INCORRECT = "Error: Host found but private token is incorrect"
CONNECTION_FAILED = "Error: Could not establish a connection"


@dataclass(frozen=True)
class ConnectionCheck:
    """Outcome of testing a server URL and private token."""

    ok: bool
    message: str


class GitLabConfiguration:
    """GitLab server URL and private token, persisted in a ``.env`` file.

    The proxy settings are read from the environment and re-read whenever the
    client is requested; a change replaces the client.
    """

    def __init__(self, env_file: str | os.PathLike[str] = ".env"):
        self.env_file = Path(env_file)
        self._server_url: str | None = None
        self._private_token: str | None = None
        self._proxy: ProxyConfig | None = None
        self._client: GitLabApiClient | None = None
        self._lock = threading.RLock()
        self.load()

    def __repr__(self) -> str:
        token = "****" if self._private_token else None
        return f"GitLabConfiguration(server_url={self._server_url!r}, private_token={token!r})"

    @property
    def server_url(self) -> str | None:
        return self._server_url

    @server_url.setter
    def server_url(self, server_url: str | None) -> None:
        with self._lock:
            self._invalidate_client()
            self._server_url = server_url

    @property
    def private_token(self) -> str | None:
        return self._private_token

    @private_token.setter
    def private_token(self, private_token: str | None) -> None:
        with self._lock:
            self._invalidate_client()
            self._private_token = private_token

    @property
    def proxy(self) -> ProxyConfig | None:
        return self._proxy

    def load(self) -> None:
        """Load previously saved settings from the ``.env`` file and the environment."""
        if self.env_file.is_file():
            load_dotenv(self.env_file)
        with self._lock:
            self._server_url = os.getenv(SERVER_URL_KEY) or os.getenv("GITLAB_BASE_URL") or None
            self._private_token = os.getenv(PRIVATE_TOKEN_KEY) or None
            self._proxy = proxy_from_env()
            self._invalidate_client()

    def save(self) -> None:
        """Write the server URL and private token to the ``.env`` file."""
        self.env_file.touch(exist_ok=True)
        for key, value in ((SERVER_URL_KEY, self._server_url), (PRIVATE_TOKEN_KEY, self._private_token)):
            if value is not None:
                set_key(self.env_file, key, value)
        logger.info(f"Saved GitLab configuration to {self.env_file}")

    def configure(self, form_data: Mapping[str, Any]) -> bool:
        """Save the settings submitted in a form with ``serverUrl`` and ``privateToken``."""
        self.server_url = form_data.get("serverUrl")
        self.private_token = form_data.get("privateToken")
        self.save()
        return True

    def is_api_configured(self) -> bool:
        """Check that a server URL and private token are set, without contacting the server."""
        return bool(self._server_url and self._server_url.strip()) and bool(
            self._private_token and self._private_token.strip()
        )

    def _invalidate_client(self) -> None:
        if self._client is not None:
            self._client.close()
        self._client = None

    def _fetch_proxy_configuration(self) -> None:
        proxy = proxy_from_env()
        if proxy != self._proxy:
            logger.info("Proxy configuration changed, the GitLab client will be recreated")
            self._proxy = proxy
            self._invalidate_client()

    def _client_config(self, server_url: str | None, private_token: str | None) -> ClientConfig:
        if not server_url or not server_url.strip():
            raise ConfigurationError("Server URL is not set")
        if not private_token or not private_token.strip():
            raise ConfigurationError("Private token is not set")
        return ClientConfig(host=server_url, private_token=private_token, proxy=self._proxy)

    def get_client(self) -> GitLabApiClient:
        """Get the API client for the configured settings.

        The client is created on first use, after a successful connection test,
        and kept until a setting changes.

        Raises:
            ConfigurationError: If the server URL or private token is not set
            GitLabError: If the connection test fails
        """
        with self._lock:
            self._fetch_proxy_configuration()
            if self._client is None:
                config = self._client_config(self._server_url, self._private_token)
                GitLabApiClient.test_connection(config)
                self._client = GitLabApiClient(config)
            return self._client

    def check_connection(self, server_url: str | None, private_token: str | None) -> ConnectionCheck:
        """Test whether a connection can be made with a server URL and private token.

        A refused token is reported separately; every other failure is
        reported as a failed connection. A server answering with something
        other than GitLab JSON counts as a failed connection too.
        """
        try:
            with self._lock:
                self._fetch_proxy_configuration()
                config = self._client_config(server_url, private_token)
            GitLabApiClient.test_connection(config)
        except AuthenticationError as e:
            logger.info(f"GitLab connection test for {server_url} refused the token: {e}")
            return ConnectionCheck(ok=False, message=TOKEN_INCORRECT)
        except GitLabError as e:
            logger.info(f"GitLab connection test for {server_url} failed: {e}")
            return ConnectionCheck(ok=False, message=CONNECTION_FAILED)
        except MalformedDataError as e:
            logger.info(f"GitLab connection test for {server_url} got an unexpected response: {e}")
            return ConnectionCheck(ok=False, message=CONNECTION_FAILED)
        return ConnectionCheck(ok=True, message=CONNECTION_ESTABLISHED)


@lru_cache
def get_configuration() -> GitLabConfiguration:
    """Return the process-wide configuration instance."""
    return GitLabConfiguration()


def get_api_client() -> GitLabApiClient:
    """Return the API client built from the process-wide configuration."""
    return get_configuration().get_client()


def is_api_configured() -> bool:
    return get_configuration().is_api_configured()
