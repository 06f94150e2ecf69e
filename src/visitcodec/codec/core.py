"""Codec object owning a purpose lookup table."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ..models.record import CompactObject, VisitRecord
from .decoder import decode, decode_object
from .encoder import encode, encode_object
from .lookup import DEFAULT_PURPOSE_LOOKUP, PurposeLookup


class VisitCodec:
    """Encoder/decoder pair bound to one purpose lookup table.

    Example:
        >>> codec = VisitCodec(PurposeLookup({"Delivery": "D1"}))
        >>> compact = codec.encode(record)
        >>> codec.decode(compact) == record.canonical(codec.lookup)
        True
    """

    def __init__(self, lookup: Optional[PurposeLookup] = None) -> None:
        self._lookup = lookup or DEFAULT_PURPOSE_LOOKUP

    @property
    def lookup(self) -> PurposeLookup:
        return self._lookup

    def encode(self, record: VisitRecord | Mapping[str, Any]) -> str:
        return encode(record, lookup=self._lookup)

    def decode(self, compact: str) -> VisitRecord:
        return decode(compact, lookup=self._lookup)

    def encode_object(self, record: VisitRecord | Mapping[str, Any]) -> CompactObject:
        return encode_object(record, lookup=self._lookup)

    def decode_object(self, compact: CompactObject | Mapping[str, str]) -> VisitRecord:
        return decode_object(compact, lookup=self._lookup)

    def __repr__(self) -> str:
        return f"VisitCodec(lookup={self._lookup!r})"
