"""Choose between the forward proxy and a direct connection per hostname."""

import logging
import re
import threading
from collections.abc import Iterable

from gitlab_api.config import ProxyConfig, compile_host_patterns

logger = logging.getLogger(__name__)


class RouteDecisionCache:
    """Thread-safe memo of whether a hostname bypasses the proxy.

    Entries are never evicted; a different set of exclusions needs a new cache.
    """

    def __init__(self) -> None:
        self._decisions: dict[str, bool] = {}
        self._lock = threading.Lock()

    def get(self, hostname: str) -> bool | None:
        """Return the cached bypass decision, or None if the host has not been seen."""
        with self._lock:
            return self._decisions.get(hostname)

    def record(self, hostname: str, bypass: bool) -> None:
        with self._lock:
            self._decisions[hostname] = bypass

    def __contains__(self, hostname: object) -> bool:
        with self._lock:
            return hostname in self._decisions

    def __len__(self) -> int:
        with self._lock:
            return len(self._decisions)


class PatternProxyRoutePlanner:
    """Route planner bypassing the proxy for hostnames matching exclusion patterns.

    A hostname is excluded when it fully matches one of the patterns. The
    verdict for each hostname is evaluated once and cached.
    """

    def __init__(
        self,
        proxy: ProxyConfig,
        excluded_host_patterns: Iterable[str | re.Pattern[str]] | None = None,
    ):
        self.proxy = proxy
        patterns = proxy.excluded_host_patterns if excluded_host_patterns is None else excluded_host_patterns
        self.excluded_host_patterns = compile_host_patterns(patterns)
        self.cache = RouteDecisionCache()

    def is_excluded(self, hostname: str) -> bool:
        """Check whether requests to a hostname bypass the proxy."""
        bypass = self.cache.get(hostname)
        if bypass is not None:
            return bypass

        bypass = any(pattern.fullmatch(hostname) for pattern in self.excluded_host_patterns)
        self.cache.record(hostname, bypass)
        logger.debug(f"Host {hostname} {'bypasses' if bypass else 'uses'} proxy {self.proxy.host}:{self.proxy.port}")
        return bypass

    def route(self, hostname: str) -> ProxyConfig | None:
        """Return the proxy to use for a hostname, or None to connect directly."""
        if self.is_excluded(hostname):
            return None
        return self.proxy
