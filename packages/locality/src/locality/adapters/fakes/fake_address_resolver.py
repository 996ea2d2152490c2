"""Fake address resolver for testing.

This module provides a fake implementation of AddressResolverPort
that allows tests to control host resolution without touching DNS.
"""

from __future__ import annotations

from locality.domain.exceptions import AddressResolutionError


class FakeAddressResolver:
    """Fake implementation of AddressResolverPort for testing.

    Resolves hosts from a fixed table; any host not in the table raises
    AddressResolutionError, as does every host once fail_all() is called.
    Every lookup is recorded in ``calls``.

    Example:
        >>> fake = FakeAddressResolver({"localhost": "127.0.0.1"})
        >>> fake.resolve("localhost")
        '127.0.0.1'
        >>> fake.calls
        ['localhost']
    """

    def __init__(self, addresses: dict[str, str] | None = None) -> None:
        """Initialize with a host -> address table.

        Args:
            addresses: Hosts this fake knows about.
        """
        self._addresses = dict(addresses or {})
        self._fail_all = False
        self._calls: list[str] = []

    @property
    def calls(self) -> list[str]:
        """Return a copy of the hosts passed to resolve(), in call order."""
        return list(self._calls)

    def add(self, host: str, address: str) -> None:
        """Register or replace the address for host."""
        self._addresses[host] = address

    def fail_all(self, enabled: bool = True) -> None:
        """Make every lookup fail, simulating an unreachable resolver."""
        self._fail_all = enabled

    def resolve(self, host: str) -> str:
        """Return the configured address for host.

        Raises:
            AddressResolutionError: If the host is unknown or failures are forced.
        """
        self._calls.append(host)
        if self._fail_all or host not in self._addresses:
            raise AddressResolutionError(host)
        return self._addresses[host]
