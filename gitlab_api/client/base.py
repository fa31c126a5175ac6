"""Base GitLab client mixin with HTTP primitives."""

import copy
import logging
from typing import Any, Self

import httpx

from gitlab_api.client.impersonation import SudoRequester
from gitlab_api.client.requester import Fields, HttpRequester, Requester
from gitlab_api.config import ClientConfig, ProxyConfig
from gitlab_api.proxy import build_transport

logger = logging.getLogger(__name__)


class BaseClientMixin:
    """Base mixin providing HTTP primitives and initialization."""

    config: ClientConfig
    client: httpx.Client
    requester: Requester

    def __init__(self, config: ClientConfig | None = None, *, transport: httpx.BaseTransport | None = None):
        """Initialize GitLab API client.

        Every client owns its own httpx client and transport, so clients with
        different proxy settings can be used side by side. No request is made.

        Args:
            config: Connection settings, read from the environment if omitted
            transport: Transport overriding the one derived from the proxy settings
        """
        self.config = config if config is not None else ClientConfig.from_env()

        self.client = httpx.Client(
            base_url=self.config.api_url,
            timeout=self.config.timeout,
            transport=transport if transport is not None else build_transport(self.config),
        )
        self._http_requester = HttpRequester(self.client, self.config.private_token)
        self.requester = self._http_requester

        logger.info(f"GitLab client initialized for {self.config.host}")

    @property
    def host(self) -> str:
        return self.config.host

    @property
    def private_token(self) -> str | None:
        return self.config.private_token

    @property
    def proxy(self) -> ProxyConfig | None:
        return self.config.proxy

    @property
    def api_url(self) -> str:
        return self.config.api_url

    @property
    def impersonated_user_id(self) -> int | None:
        """The ID of the impersonated user, None for a client acting as itself."""
        return self.requester.user_id if isinstance(self.requester, SudoRequester) else None

    def get(self, path: str, fields: Fields | None = None) -> httpx.Response:
        """GET request to GitLab API with the private token."""
        return self.requester.get(path, fields)

    def post(self, path: str, fields: Fields | None = None) -> httpx.Response:
        """POST request to GitLab API with the private token."""
        return self.requester.post(path, fields)

    def as_user(self, user_id: int) -> Self:
        """Return a client acting on behalf of another user.

        Impersonating users is only possible with the private token of an
        administrator. The returned client shares this client's connection;
        creating it makes no request.

        Args:
            user_id: ID of the user to impersonate

        Returns:
            A client with the same access as the impersonated user
        """
        impersonating = copy.copy(self)
        impersonating.requester = SudoRequester(self._http_requester, user_id)
        return impersonating

    def close(self) -> None:
        """Close the underlying connection (shared with impersonating clients)."""
        self.client.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
