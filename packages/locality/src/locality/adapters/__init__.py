"""Interface adapters: resolvers, codecs, logging and metrics."""

from locality.adapters.ports import (
    AddressResolverPort,
    LoggingPort,
    TimeProvider,
    RealTimeProvider,
    SocketAddressResolver,
    StdlibLoggingAdapter,
)
from locality.adapters.cached_address_resolver import CachedAddressResolver
from locality.adapters.metrics_port import MetricsPort, NoOpMetricsAdapter
from locality.adapters.record_codec import RecordCodec
from locality.adapters.wire_codec import WireCodec

__all__ = [
    "AddressResolverPort",
    "LoggingPort",
    "TimeProvider",
    "RealTimeProvider",
    "SocketAddressResolver",
    "StdlibLoggingAdapter",
    "CachedAddressResolver",
    "MetricsPort",
    "NoOpMetricsAdapter",
    "RecordCodec",
    "WireCodec",
]
