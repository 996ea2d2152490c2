"""Record codec: TieredIdentity to and from a plain structured record.

The record form is what gets persisted or sent over HTTP-style transports::

    {"tiers": [{"tier": "node", "value": "A"}, {"tier": "rack", "value": "r1"}]}

Decoding policy:
    - the top level must be a mapping holding a "tiers" list
    - each entry must be a mapping with string "tier" and "value" fields
    - extra keys at either level are ignored
    - anything else raises DecodeError naming the offending field
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from locality.domain.exceptions import DecodeError, LocalityConfigError
from locality.domain.identity import LocalityTier, TieredIdentity

TIERS_FIELD = "tiers"
TIER_FIELD = "tier"
VALUE_FIELD = "value"


class RecordCodec:
    """Converts identities to and from the record form and its JSON bytes."""

    def to_record(self, identity: TieredIdentity) -> dict[str, Any]:
        """Render identity as a record, preserving tier order."""
        return {
            TIERS_FIELD: [
                {TIER_FIELD: tier.tier_name, VALUE_FIELD: tier.value}
                for tier in identity.tiers
            ]
        }

    def from_record(self, record: Any) -> TieredIdentity:
        """Build an identity from a record.

        Args:
            record: Mapping in the record form.

        Returns:
            The decoded TieredIdentity.

        Raises:
            DecodeError: If the record cannot be read as a list of tier/value pairs.
        """
        if not isinstance(record, Mapping):
            raise DecodeError(
                f"record must be a mapping, got: {type(record).__name__}", field="$"
            )

        if TIERS_FIELD not in record:
            raise DecodeError("missing required field", field=TIERS_FIELD)

        entries = record[TIERS_FIELD]
        if not isinstance(entries, list):
            raise DecodeError(
                f"expected a list, got: {type(entries).__name__}", field=TIERS_FIELD
            )

        tiers = [self._decode_tier(entry, index) for index, entry in enumerate(entries)]
        return TieredIdentity(tuple(tiers))

    def _decode_tier(self, entry: Any, index: int) -> LocalityTier:
        path = f"{TIERS_FIELD}[{index}]"

        if not isinstance(entry, Mapping):
            raise DecodeError(
                f"expected a mapping, got: {type(entry).__name__}", field=path
            )

        for name in (TIER_FIELD, VALUE_FIELD):
            if name not in entry:
                raise DecodeError("missing required field", field=f"{path}.{name}")
            if not isinstance(entry[name], str):
                raise DecodeError(
                    f"expected a string, got: {type(entry[name]).__name__}",
                    field=f"{path}.{name}",
                )

        try:
            return LocalityTier(entry[TIER_FIELD], entry[VALUE_FIELD])
        except LocalityConfigError as e:
            raise DecodeError(str(e), field=f"{path}.{TIER_FIELD}", original_error=e) from e

    def dumps(self, identity: TieredIdentity) -> bytes:
        """Encode identity as compact UTF-8 JSON.

        Key order and tier order are fixed, so equal identities always
        produce identical bytes.
        """
        return json.dumps(
            self.to_record(identity), ensure_ascii=False, separators=(",", ":")
        ).encode("utf-8")

    def loads(self, data: bytes | str) -> TieredIdentity:
        """Decode identity from JSON produced by dumps().

        Raises:
            DecodeError: If data is not valid JSON or not a valid record.
        """
        try:
            record = json.loads(data)
        except (ValueError, TypeError) as e:
            raise DecodeError(f"invalid JSON: {e}", field="$", original_error=e) from e
        except RecursionError as e:
            raise DecodeError("JSON nested too deeply", field="$", original_error=e) from e
        return self.from_record(record)
