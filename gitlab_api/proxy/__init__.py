"""Forward proxy routing for the GitLab API client."""

from gitlab_api.proxy.route_planner import PatternProxyRoutePlanner, RouteDecisionCache
from gitlab_api.proxy.transport import ProxyRoutingTransport, build_transport

__all__ = [
    "PatternProxyRoutePlanner",
    "RouteDecisionCache",
    "ProxyRoutingTransport",
    "build_transport",
]
