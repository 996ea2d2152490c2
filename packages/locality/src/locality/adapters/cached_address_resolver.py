"""Cached address resolver decorator."""

from __future__ import annotations

import threading

from locality.adapters.ports import AddressResolverPort, RealTimeProvider, TimeProvider


class CachedAddressResolver:
    """Decorator that adds TTL-based caching to an AddressResolverPort.

    When ttl_seconds is 0, no caching is applied and every call to resolve()
    delegates directly to the wrapped resolver.

    When ttl_seconds > 0, successful lookups are cached per host for the
    specified duration. Failures are never cached so a host that comes back
    is picked up on the next call.

    Thread safety:
        The cache is guarded by a lock. Lookups themselves run outside the
        lock, so two threads missing on the same host may both resolve it.
    """

    def __init__(
        self,
        wrapped: AddressResolverPort,
        ttl_seconds: float = 0,
        time_provider: TimeProvider | None = None,
    ) -> None:
        """Initialize cached resolver.

        Args:
            wrapped: The resolver to wrap.
            ttl_seconds: Cache TTL in seconds. 0 means no caching.
            time_provider: Clock used for expiry. Defaults to monotonic time.
        """
        self._wrapped = wrapped
        self._ttl_seconds = ttl_seconds
        self._time = time_provider if time_provider is not None else RealTimeProvider()
        self._cache: dict[str, tuple[str, float]] = {}
        self._lock = threading.Lock()

    def resolve(self, host: str) -> str:
        """Resolve host, serving from cache while the entry is fresh.

        Raises:
            AddressResolutionError: Propagated from the wrapped resolver.
        """
        if self._ttl_seconds <= 0:
            return self._wrapped.resolve(host)

        now = self._time.get_time_seconds()

        with self._lock:
            cached = self._cache.get(host)
            if cached is not None:
                address, cached_at = cached
                if now - cached_at < self._ttl_seconds:
                    return address
                del self._cache[host]

        address = self._wrapped.resolve(host)

        with self._lock:
            self._sweep_expired(now)
            self._cache[host] = (address, now)
        return address

    def _sweep_expired(self, now: float) -> None:
        """Drop expired entries. Caller must hold the lock."""
        expired = [
            host
            for host, (_, cached_at) in self._cache.items()
            if now - cached_at >= self._ttl_seconds
        ]
        for host in expired:
            del self._cache[host]

    def cached_hosts(self) -> list[str]:
        """Return the hosts currently held in the cache."""
        with self._lock:
            return list(self._cache)

    def invalidate(self, host: str | None = None) -> None:
        """Drop one cached host, or every cached host when host is None."""
        with self._lock:
            if host is None:
                self._cache.clear()
            else:
                self._cache.pop(host, None)
