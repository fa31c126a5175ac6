"""Unit tests for the per-client proxy routing transport."""

import httpx

from gitlab_api.client import GitLabApiClient
from gitlab_api.config import ClientConfig, ProxyConfig
from gitlab_api.proxy.route_planner import PatternProxyRoutePlanner
from gitlab_api.proxy.transport import ProxyRoutingTransport, build_transport, make_proxy


def recording_transport(name: str, seen: list[tuple[str, str]]) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        seen.append((name, request.url.host))
        return httpx.Response(200, json={"via": name})

    return httpx.MockTransport(handler)


class TestProxyRoutingTransport:
    """Tests for ProxyRoutingTransport."""

    def test_routes_by_hostname(self) -> None:
        """Test that excluded hosts go direct and other hosts through the proxy."""
        seen: list[tuple[str, str]] = []
        planner = PatternProxyRoutePlanner(
            ProxyConfig(host="proxy", port=3128, excluded_host_patterns=(r".*\.internal",))
        )
        transport = ProxyRoutingTransport(
            planner,
            direct=recording_transport("direct", seen),
            proxied=recording_transport("proxied", seen),
        )

        with httpx.Client(transport=transport) as http_client:
            assert http_client.get("https://gitlab.internal/api/v3/user").json() == {"via": "direct"}
            assert http_client.get("https://gitlab.com/api/v3/user").json() == {"via": "proxied"}
            assert http_client.get("https://gitlab.internal/api/v3/users").json() == {"via": "direct"}

        assert seen == [("direct", "gitlab.internal"), ("proxied", "gitlab.com"), ("direct", "gitlab.internal")]
        assert len(planner.cache) == 2


class TestBuildTransport:
    """Tests for build_transport."""

    def test_no_proxy(self) -> None:
        """Test that no transport is built without a proxy."""
        assert build_transport(ClientConfig(host="https://gitlab.example.com")) is None

    def test_proxy_without_exclusions(self) -> None:
        """Test that a plain proxied transport is used without exclusions."""
        config = ClientConfig(host="https://gitlab.example.com", proxy=ProxyConfig(host="proxy", port=3128))
        transport = build_transport(config)

        assert isinstance(transport, httpx.HTTPTransport)

    def test_proxy_with_exclusions(self) -> None:
        """Test that exclusions produce a routing transport."""
        proxy = ProxyConfig(host="proxy", port=3128, excluded_host_patterns=("localhost",))
        transport = build_transport(ClientConfig(host="https://gitlab.example.com", proxy=proxy))

        assert isinstance(transport, ProxyRoutingTransport)
        assert transport.planner.proxy == proxy
        transport.close()

    def test_make_proxy_with_credentials(self) -> None:
        """Test that proxy credentials are passed to httpx."""
        proxy = make_proxy(ProxyConfig(host="proxy", port=3128, user="jane", password="secret"))

        assert proxy.url.host == "proxy"
        assert proxy.url.port == 3128
        assert proxy.auth == ("jane", "secret")

    def test_make_proxy_without_credentials(self) -> None:
        """Test that no credentials are set without a proxy user."""
        proxy = make_proxy(ProxyConfig(host="proxy", port=3128, password="ignored"))
        assert proxy.auth is None


class TestClientTransportIsolation:
    """Tests that clients do not share transport state."""

    def test_each_client_owns_its_transport(self) -> None:
        """Test that building a second client leaves the first client's proxy untouched."""
        first = GitLabApiClient(
            ClientConfig(
                host="https://gitlab.example.com",
                proxy=ProxyConfig(host="proxy-a", port=3128, excluded_host_patterns=("localhost",)),
            )
        )
        second = GitLabApiClient(
            ClientConfig(
                host="https://gitlab.example.com",
                proxy=ProxyConfig(host="proxy-b", port=8080, excluded_host_patterns=("localhost",)),
            )
        )

        try:
            assert first.client._transport is not second.client._transport
            assert first.client._transport.planner.proxy.host == "proxy-a"
            assert second.client._transport.planner.proxy.host == "proxy-b"
        finally:
            first.close()
            second.close()
