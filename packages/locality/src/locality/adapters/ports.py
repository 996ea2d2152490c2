"""Port interfaces for the locality core package.

Ports define the contracts that adapters must implement.
These are Protocol classes (structural subtyping) for flexible testing.
"""

from __future__ import annotations

import ipaddress
import logging
import socket
import time
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import Protocol, runtime_checkable

from locality.domain.exceptions import AddressResolutionError
from locality.domain.settings import DEFAULT_RESOLUTION_TIMEOUT_SECONDS


@runtime_checkable
class AddressResolverPort(Protocol):
    """Port interface for resolving host names to network addresses.

    Used by tier matching when node-tier values are compared by address.

    Contract:
        - resolve(host) returns a canonical textual address (e.g. '127.0.0.1')
        - Equal hosts must resolve to equal strings so results can be compared
        - Raises AddressResolutionError for unknown hosts, resolver errors
          and timeouts; no other exception may escape
        - Must not block longer than the implementation's configured bound
    """

    def resolve(self, host: str) -> str:
        """Resolve a host name or IP literal to a canonical address.

        Args:
            host: Host name or IP address string.

        Returns:
            Canonical address string.

        Raises:
            AddressResolutionError: If the host cannot be resolved.
        """
        ...


@runtime_checkable
class LoggingPort(Protocol):
    """Port interface for structured logging.

    Implementations handle log message delivery to configured logging backends.
    Abstracts the logging mechanism from use cases that report selection
    decisions and misaligned candidates.

    Contract:
        - debug(message) logs a debug-level message
        - warning(message) logs a warning-level message
        - Both are fire-and-forget (no return value, no exceptions propagated)
        - Thread safety is implementation-defined
    """

    def debug(self, message: str) -> None:
        """Log a debug message.

        Args:
            message: The debug message to log.
        """
        ...

    def warning(self, message: str) -> None:
        """Log a warning message.

        Args:
            message: The warning message to log.
        """
        ...


@runtime_checkable
class TimeProvider(Protocol):
    """Port interface for time operations.

    Implementations provide a monotonic clock reading in seconds.
    This abstraction enables deterministic testing of cache expiry.

    Contract:
        - get_time_seconds() returns the current time as float
        - Successive calls must return non-decreasing values (monotonic)
    """

    def get_time_seconds(self) -> float:
        """Return current time in seconds."""
        ...


class RealTimeProvider:
    """Default implementation: provides real monotonic time.

    Uses time.monotonic() so cache expiry is unaffected by wall clock changes.
    """

    def get_time_seconds(self) -> float:
        return time.monotonic()


class StdlibLoggingAdapter:
    """Default implementation: forwards messages to the logging module.

    Example:
        >>> logger = StdlibLoggingAdapter()
        >>> logger.warning("candidate tiers are not aligned")
    """

    def __init__(self, name: str = "locality") -> None:
        """Initialize with the name of the stdlib logger to use.

        Args:
            name: Logger name. Defaults to "locality".
        """
        self._logger = logging.getLogger(name)

    def debug(self, message: str) -> None:
        self._logger.debug(message)

    def warning(self, message: str) -> None:
        self._logger.warning(message)


class SocketAddressResolver:
    """Default implementation: resolve hosts through the system resolver.

    Lookups run on a small worker pool so that a slow DNS server cannot hold
    the caller for longer than timeout_seconds. IPv4 results are preferred
    when a host has both families, and addresses are returned in their
    compressed textual form.
    """

    def __init__(
        self,
        timeout_seconds: float = DEFAULT_RESOLUTION_TIMEOUT_SECONDS,
        max_workers: int = 4,
    ) -> None:
        """Initialize socket resolver.

        Args:
            timeout_seconds: Maximum time to wait for one lookup.
            max_workers: Size of the lookup worker pool.
        """
        self._timeout_seconds = timeout_seconds
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="locality-resolver"
        )

    @property
    def timeout_seconds(self) -> float:
        return self._timeout_seconds

    def resolve(self, host: str) -> str:
        """Resolve host to a canonical address string.

        Raises:
            AddressResolutionError: If the host is empty, contains a NUL
                                    byte, is unknown, or the lookup does not
                                    finish in time.
        """
        if not host:
            raise AddressResolutionError(host, "Cannot resolve an empty host")

        # getaddrinfo silently truncates at NUL
        if "\x00" in host:
            raise AddressResolutionError(host, f"Host {host!r} contains a NUL byte")

        # IP literals need no lookup
        try:
            return ipaddress.ip_address(host).compressed
        except ValueError:
            pass

        future = self._executor.submit(self._lookup, host)
        try:
            return future.result(timeout=self._timeout_seconds)
        except FutureTimeoutError as e:
            future.cancel()
            raise AddressResolutionError(
                host,
                f"Resolving {host!r} timed out after {self._timeout_seconds}s",
                original_error=e,
            ) from e

    @staticmethod
    def _lookup(host: str) -> str:
        try:
            infos = socket.getaddrinfo(host, None, proto=socket.IPPROTO_TCP)
        except (OSError, UnicodeError) as e:
            raise AddressResolutionError(host, original_error=e) from e

        if not infos:
            raise AddressResolutionError(host, f"No addresses found for {host!r}")

        ipv4 = [info for info in infos if info[0] == socket.AF_INET]
        family_first = ipv4[0] if ipv4 else infos[0]
        # IPv6 sockaddr may carry a scope suffix ("fe80::1%eth0")
        address = str(family_first[4][0]).split("%", 1)[0]
        try:
            return ipaddress.ip_address(address).compressed
        except ValueError as e:
            raise AddressResolutionError(
                host, f"Unusable address {address!r} for {host!r}", original_error=e
            ) from e

    def close(self) -> None:
        """Shut down the lookup worker pool without waiting for lookups."""
        self._executor.shutdown(wait=False)
