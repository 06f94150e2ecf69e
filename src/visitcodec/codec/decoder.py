"""Compact decoder for visit records.

This module provides the decode() and decode_object() functions that turn a
compact string or compact object back into a VisitRecord.
"""

from __future__ import annotations

from typing import Mapping, Optional

from pydantic import ValidationError

from ..exceptions import DecodeError
from ..framing import split_fields
from ..models.record import CompactObject, VisitRecord
from .assembler import assemble_record
from .lookup import PurposeLookup
from .schema import RecordSchema


def decode(compact: str, *, lookup: Optional[PurposeLookup] = None) -> VisitRecord:
    """Decode a compact string to a VisitRecord.

    Args:
        compact: Compact string produced by encode()
        lookup: Purpose table (default table if omitted)

    Returns:
        Decoded VisitRecord

    Raises:
        FramingError: If the string does not split into exactly 11 fields
        DecodeError: If a field is malformed
    """
    schema = RecordSchema.from_model(VisitRecord)
    segments = split_fields(compact, schema.fields)
    return assemble_record(dict(zip(schema.names, segments)), lookup)


def decode_object(
    compact: CompactObject | Mapping[str, str],
    *,
    lookup: Optional[PurposeLookup] = None,
) -> VisitRecord:
    """Decode a compact object (or plain mapping of hex fields) to a VisitRecord.

    Args:
        compact: CompactObject or mapping with one hex value per field
        lookup: Purpose table (default table if omitted)

    Returns:
        Decoded VisitRecord

    Raises:
        DecodeError: If a key is missing or a field is malformed
    """
    if not isinstance(compact, CompactObject):
        if not isinstance(compact, Mapping):
            raise DecodeError(
                f"expected CompactObject or mapping, got {type(compact).__name__}"
            )
        try:
            compact = CompactObject.model_validate(dict(compact))
        except ValidationError as err:
            raise DecodeError(f"Invalid compact object: {err}") from err

    return assemble_record(compact.model_dump(), lookup)
