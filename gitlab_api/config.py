"""Connection configuration for the GitLab API client."""

import logging
import os
import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from dotenv import load_dotenv

from gitlab_api.exceptions import ConfigurationError

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_GITLAB_URL = "https://gitlab.com"
DEFAULT_TIMEOUT = 30.0
API_PATH = "/api/v3"

_NO_PROXY_SEPARATORS = re.compile(r"[\s,|]+")


def compile_host_patterns(patterns: Iterable[str | re.Pattern[str]]) -> tuple[re.Pattern[str], ...]:
    """Compile hostname patterns, leaving already compiled ones untouched."""
    return tuple(re.compile(p) if isinstance(p, str) else p for p in patterns)


def no_proxy_host_patterns(value: str | None) -> list[re.Pattern[str]]:
    """Convert a no-proxy host list into full-match hostname patterns.

    Entries are separated by whitespace, commas or pipes. Within an entry ``*``
    matches any run of characters and every other character is literal, so
    ``*.example.com`` becomes ``.*\\.example\\.com``.

    Args:
        value: The host list, e.g. ``"localhost, *.internal.example.com"``

    Returns:
        Compiled patterns in the order they were listed
    """
    if not value:
        return []
    entries = [entry for entry in _NO_PROXY_SEPARATORS.split(value.strip()) if entry]
    return [re.compile(".*".join(re.escape(part) for part in entry.split("*"))) for entry in entries]


@dataclass(frozen=True)
class ProxyConfig:
    """Forward proxy settings.

    Hosts whose name fully matches one of ``excluded_host_patterns`` are
    reached directly instead of through the proxy.
    """

    host: str
    port: int
    user: str | None = None
    password: str | None = None
    excluded_host_patterns: tuple[re.Pattern[str], ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "excluded_host_patterns", compile_host_patterns(self.excluded_host_patterns))

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}"


@dataclass(frozen=True)
class ClientConfig:
    """Settings a :class:`~gitlab_api.client.GitLabApiClient` is built from.

    Attributes:
        host: URL of the GitLab server, without the API path
        private_token: Token authenticating every request (None before a session is opened)
        proxy: Forward proxy, or None to connect directly
        timeout: Network timeout in seconds applied to every request, None to wait forever
    """

    host: str
    private_token: str | None = None
    proxy: ProxyConfig | None = None
    timeout: float | None = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        host = (self.host or "").strip().rstrip("/")
        if not host.startswith(("http://", "https://")):
            logger.error(f"Invalid GitLab URL: {self.host}")
            raise ConfigurationError(f"GitLab URL must start with http:// or https://, got: {self.host}")
        object.__setattr__(self, "host", host)

    @property
    def api_url(self) -> str:
        return f"{self.host}{API_PATH}"

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Build a configuration from ``GITLAB_*`` environment variables."""
        host = os.getenv("GITLAB_URL") or os.getenv("GITLAB_BASE_URL") or DEFAULT_GITLAB_URL
        timeout = _parse_number(os.getenv("GITLAB_TIMEOUT"), float, "GITLAB_TIMEOUT", DEFAULT_TIMEOUT)
        return cls(
            host=host,
            private_token=os.getenv("GITLAB_TOKEN") or None,
            proxy=proxy_from_env(),
            timeout=timeout,
        )


def proxy_from_env() -> ProxyConfig | None:
    """Read the proxy settings from the environment, None if no proxy host is set."""
    proxy_host = (os.getenv("GITLAB_PROXY_HOST") or "").strip()
    if not proxy_host:
        return None
    port = _parse_number(os.getenv("GITLAB_PROXY_PORT"), int, "GITLAB_PROXY_PORT", None)
    if port is None:
        raise ConfigurationError(f"GITLAB_PROXY_PORT must be set when GITLAB_PROXY_HOST is set ({proxy_host})")
    return ProxyConfig(
        host=proxy_host,
        port=port,
        user=(os.getenv("GITLAB_PROXY_USER") or "").strip() or None,
        password=(os.getenv("GITLAB_PROXY_PASSWORD") or "").strip() or None,
        excluded_host_patterns=tuple(no_proxy_host_patterns(os.getenv("GITLAB_NO_PROXY_HOSTS"))),
    )


def _parse_number(value: str | None, kind: type, name: str, default: Any) -> Any:
    if value is None or not value.strip():
        return default
    try:
        return kind(value)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be a number, got: {value}") from e
