"""Unit tests for port interfaces and default implementations."""

import logging
import socket
import threading
from unittest.mock import patch

import pytest

from locality.adapters.ports import (
    AddressResolverPort,
    LoggingPort,
    RealTimeProvider,
    SocketAddressResolver,
    StdlibLoggingAdapter,
    TimeProvider,
)
from locality.domain.exceptions import AddressResolutionError
from tests.core.unit.fakes import FakeLoggingAdapter


@pytest.mark.tier(1)
@pytest.mark.tra("Port.AddressResolverPort")
class TestAddressResolverPort:
    def test_protocol_is_runtime_checkable(self) -> None:
        class StaticResolver:
            def resolve(self, host: str) -> str:
                return "127.0.0.1"

        assert isinstance(StaticResolver(), AddressResolverPort)

    def test_socket_resolver_implements_port(self) -> None:
        resolver = SocketAddressResolver()
        try:
            assert isinstance(resolver, AddressResolverPort)
        finally:
            resolver.close()


@pytest.mark.tier(1)
@pytest.mark.tra("Port.LoggingPort")
class TestLoggingPort:
    def test_fake_and_stdlib_adapters_implement_port(self) -> None:
        assert isinstance(FakeLoggingAdapter(), LoggingPort)
        assert isinstance(StdlibLoggingAdapter(), LoggingPort)

    def test_stdlib_adapter_forwards_to_named_logger(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        adapter = StdlibLoggingAdapter("locality.test")
        with caplog.at_level(logging.DEBUG, logger="locality.test"):
            adapter.debug("selected node")
            adapter.warning("tiers not aligned")

        records = [(r.name, r.levelno, r.getMessage()) for r in caplog.records]
        assert ("locality.test", logging.DEBUG, "selected node") in records
        assert ("locality.test", logging.WARNING, "tiers not aligned") in records


@pytest.mark.tier(1)
@pytest.mark.tra("Port.TimeProvider")
class TestRealTimeProvider:
    def test_monotonic(self) -> None:
        provider = RealTimeProvider()
        assert isinstance(provider, TimeProvider)
        first = provider.get_time_seconds()
        assert provider.get_time_seconds() >= first


def _addrinfo(*addresses: tuple[int, str]) -> list[tuple]:
    return [
        (family, socket.SOCK_STREAM, socket.IPPROTO_TCP, "", (address, 0))
        for family, address in addresses
    ]


@pytest.mark.tier(1)
@pytest.mark.tra("Adapter.SocketAddressResolver")
class TestSocketAddressResolver:
    @pytest.fixture
    def resolver(self):
        resolver = SocketAddressResolver(timeout_seconds=0.5)
        yield resolver
        resolver.close()

    def test_ip_literals_skip_lookup(self, resolver: SocketAddressResolver) -> None:
        with patch("locality.adapters.ports.socket.getaddrinfo") as getaddrinfo:
            assert resolver.resolve("127.0.0.1") == "127.0.0.1"
            assert resolver.resolve("0:0:0:0:0:0:0:1") == "::1"
        getaddrinfo.assert_not_called()

    def test_prefers_ipv4(self, resolver: SocketAddressResolver) -> None:
        infos = _addrinfo((socket.AF_INET6, "::1"), (socket.AF_INET, "127.0.0.1"))
        with patch("locality.adapters.ports.socket.getaddrinfo", return_value=infos):
            assert resolver.resolve("localhost") == "127.0.0.1"

    def test_ipv6_only_host(self, resolver: SocketAddressResolver) -> None:
        infos = _addrinfo((socket.AF_INET6, "fe80::1%eth0"))
        with patch("locality.adapters.ports.socket.getaddrinfo", return_value=infos):
            assert resolver.resolve("link-local") == "fe80::1"

    def test_unknown_host(self, resolver: SocketAddressResolver) -> None:
        error = socket.gaierror(socket.EAI_NONAME, "Name or service not known")
        with patch("locality.adapters.ports.socket.getaddrinfo", side_effect=error):
            with pytest.raises(AddressResolutionError) as exc_info:
                resolver.resolve("nowhere.invalid")
        assert exc_info.value.host == "nowhere.invalid"
        assert exc_info.value.original_error is error

    def test_empty_host(self, resolver: SocketAddressResolver) -> None:
        with pytest.raises(AddressResolutionError, match="empty host"):
            resolver.resolve("")

    def test_nul_byte_rejected_before_lookup(
        self, resolver: SocketAddressResolver
    ) -> None:
        with patch("locality.adapters.ports.socket.getaddrinfo") as getaddrinfo:
            with pytest.raises(AddressResolutionError, match="NUL") as exc_info:
                resolver.resolve("localhost\x00evil")
        assert exc_info.value.host == "localhost\x00evil"
        getaddrinfo.assert_not_called()

    def test_timeout_reported_as_resolution_error(self) -> None:
        release = threading.Event()

        def slow_lookup(*args, **kwargs):
            release.wait(5)
            return _addrinfo((socket.AF_INET, "10.0.0.1"))

        resolver = SocketAddressResolver(timeout_seconds=0.05)
        try:
            with patch("locality.adapters.ports.socket.getaddrinfo", side_effect=slow_lookup):
                with pytest.raises(AddressResolutionError, match="timed out"):
                    resolver.resolve("slow.example")
        finally:
            release.set()
            resolver.close()
