"""httpx transport applying a :class:`PatternProxyRoutePlanner` to every request."""

import logging

import httpx

from gitlab_api.config import ClientConfig, ProxyConfig
from gitlab_api.proxy.route_planner import PatternProxyRoutePlanner

logger = logging.getLogger(__name__)


def make_proxy(proxy: ProxyConfig) -> httpx.Proxy:
    """Create the httpx proxy, with credentials when a proxy user is set."""
    if proxy.user is not None:
        return httpx.Proxy(proxy.url, auth=(proxy.user, proxy.password or ""))
    return httpx.Proxy(proxy.url)


class ProxyRoutingTransport(httpx.BaseTransport):
    """Send each request either through the proxy or directly, as the planner decides."""

    def __init__(
        self,
        planner: PatternProxyRoutePlanner,
        direct: httpx.BaseTransport,
        proxied: httpx.BaseTransport,
    ):
        self.planner = planner
        self.direct = direct
        self.proxied = proxied

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        if self.planner.route(request.url.host) is None:
            return self.direct.handle_request(request)
        return self.proxied.handle_request(request)

    def close(self) -> None:
        self.direct.close()
        self.proxied.close()


def build_transport(config: ClientConfig) -> httpx.BaseTransport | None:
    """Build the transport owned by one client.

    Returns None when no proxy is configured, leaving httpx to honour the
    standard proxy environment variables.
    """
    if config.proxy is None:
        return None

    proxy = config.proxy
    logger.debug(
        f"Using proxy {proxy.host}:{proxy.port} with {len(proxy.excluded_host_patterns)} excluded host pattern(s)"
    )
    proxied = httpx.HTTPTransport(proxy=make_proxy(proxy))
    if not proxy.excluded_host_patterns:
        return proxied
    return ProxyRoutingTransport(PatternProxyRoutePlanner(proxy), direct=httpx.HTTPTransport(), proxied=proxied)
