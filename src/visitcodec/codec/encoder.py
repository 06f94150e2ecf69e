"""Compact encoder for visit records.

This module provides the encode() and encode_object() functions that turn a
VisitRecord into its compact string or compact object form.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from ..exceptions import EncodeError, FramingError
from ..framing import join_fields, split_fields
from ..models.record import CompactObject, VisitRecord
from .assembler import disassemble_record
from .lookup import PurposeLookup
from .schema import RecordSchema

logger = logging.getLogger(__name__)


def encode(
    record: VisitRecord | Mapping[str, Any],
    *,
    lookup: Optional[PurposeLookup] = None,
) -> str:
    """Encode a visit record to a compact string.

    Fields are hex-encoded in schema order and joined with the "1c" separator.
    The result is checked to split back into the same fields, so every string
    returned here can be decoded.

    Args:
        record: VisitRecord instance or mapping with all 11 fields
        lookup: Purpose table (default table if omitted)

    Returns:
        Compact string of lowercase hex digits

    Raises:
        EncodeError: If the record is invalid or a field would collide with
            the separator

    Examples:
        ```python
        from visitcodec import encode, decode

        compact = encode(record)
        decoded = decode(compact)
        assert decoded == record.canonical()
        ```
    """
    encoded = disassemble_record(record, lookup)
    compact = join_fields(encoded.values())

    schema = RecordSchema.from_model(VisitRecord)
    try:
        segments = split_fields(compact, schema.fields)
    except FramingError as err:
        raise EncodeError(f"Encoded record collides with the field separator: {err}") from err

    for name, segment in zip(schema.names, segments):
        if segment != encoded[name]:
            raise EncodeError(f"Field {name}: encoded value collides with the field separator")

    logger.debug("Encoded visit record into %d characters", len(compact))
    return compact


def encode_object(
    record: VisitRecord | Mapping[str, Any],
    *,
    lookup: Optional[PurposeLookup] = None,
) -> CompactObject:
    """Encode a visit record to a compact object keyed by field name.

    Args:
        record: VisitRecord instance or mapping with all 11 fields
        lookup: Purpose table (default table if omitted)

    Returns:
        CompactObject with one hex value per field

    Raises:
        EncodeError: If the record or any field value is invalid
    """
    return CompactObject(**disassemble_record(record, lookup))
