"""Wire codec: compact MessagePack encoding for cluster-internal messages.

Identities travel as msgspec structs encoded array-like, so a two tier
identity is just ``[[["node", "A"], ["rack", "r1"]]]`` on the wire.
"""

from __future__ import annotations

import re

import msgspec

from locality.domain.exceptions import DecodeError, LocalityConfigError
from locality.domain.identity import LocalityTier, TieredIdentity

# msgspec reports error locations as "... - at `$[0][1][1]`"
_PATH_PATTERN = re.compile(r"at `(\$[^`]*)`")
_INDEX_PATTERN = re.compile(r"\[(\d+)\]")
_TIER_FIELDS = ("tier", "value")


class WireLocalityTier(msgspec.Struct, array_like=True, frozen=True):
    tier: str
    value: str


class WireTieredIdentity(msgspec.Struct, array_like=True, frozen=True):
    tiers: list[WireLocalityTier]


def _field_from_path(path: str) -> str:
    """Translate a msgspec error path into tiers[i].tier/value form."""
    indexes = [int(index) for index in _INDEX_PATTERN.findall(path)]
    if not indexes or indexes[0] != 0:
        return "$"
    if len(indexes) == 1:
        return "tiers"
    field = f"tiers[{indexes[1]}]"
    if len(indexes) >= 3 and indexes[2] < len(_TIER_FIELDS):
        field = f"{field}.{_TIER_FIELDS[indexes[2]]}"
    return field


class WireCodec:
    """Converts identities to and from MessagePack bytes.

    Encoder and decoder instances are created once and reused; both are
    safe to share between threads.
    """

    def __init__(self) -> None:
        self._encoder = msgspec.msgpack.Encoder()
        self._decoder = msgspec.msgpack.Decoder(WireTieredIdentity)

    def to_struct(self, identity: TieredIdentity) -> WireTieredIdentity:
        return WireTieredIdentity(
            tiers=[
                WireLocalityTier(tier=tier.tier_name, value=tier.value)
                for tier in identity.tiers
            ]
        )

    def from_struct(self, struct: WireTieredIdentity) -> TieredIdentity:
        """Build an identity from a decoded wire struct.

        Raises:
            DecodeError: If a tier name is not a valid tier name.
        """
        tiers = []
        for index, wire_tier in enumerate(struct.tiers):
            try:
                tiers.append(LocalityTier(wire_tier.tier, wire_tier.value))
            except LocalityConfigError as e:
                raise DecodeError(
                    str(e), field=f"tiers[{index}].tier", original_error=e
                ) from e
        return TieredIdentity(tuple(tiers))

    def to_wire(self, identity: TieredIdentity) -> bytes:
        """Encode identity as MessagePack bytes."""
        return self._encoder.encode(self.to_struct(identity))

    def from_wire(self, data: bytes) -> TieredIdentity:
        """Decode identity from MessagePack bytes.

        Raises:
            DecodeError: If data is truncated, not MessagePack, or does not
                         have the wire identity shape.
        """
        try:
            struct = self._decoder.decode(data)
        except msgspec.ValidationError as e:
            match = _PATH_PATTERN.search(str(e))
            field = _field_from_path(match.group(1)) if match else "$"
            raise DecodeError(str(e), field=field, original_error=e) from e
        except (msgspec.DecodeError, TypeError) as e:
            raise DecodeError(str(e), field="$", original_error=e) from e
        return self.from_struct(struct)
