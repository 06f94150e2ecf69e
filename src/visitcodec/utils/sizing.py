"""Compact size calculation utilities.

This module provides functions to compare the compact form of a visit record
with its JSON form. Each pair of hex characters in the compact string counts
as one byte, as it would when sent in binary.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ..codec.assembler import coerce_record, disassemble_record
from ..codec.encoder import encode
from ..codec.lookup import PurposeLookup
from ..models.record import VisitRecord


def encoded_size(
    record: VisitRecord | Mapping[str, Any], *, lookup: Optional[PurposeLookup] = None
) -> int:
    """Calculate the compact size of a record in bytes.

    Args:
        record: Record to encode
        lookup: Purpose table (default table if omitted)

    Returns:
        Size in bytes (an odd trailing hex digit counts as a full byte)

    Example:
        >>> encoded_size(record)
        84
    """
    return (len(encode(record, lookup=lookup)) + 1) // 2


def json_size(record: VisitRecord | Mapping[str, Any]) -> int:
    """Calculate the size of the record as compact UTF-8 JSON in bytes."""
    return len(coerce_record(record).model_dump_json().encode("utf-8"))


def field_sizes(
    record: VisitRecord | Mapping[str, Any], *, lookup: Optional[PurposeLookup] = None
) -> dict[str, int]:
    """Get the encoded size of each field in hex characters.

    Example:
        >>> field_sizes(record)["identity_number"]
        6
    """
    return {
        name: len(value) for name, value in disassemble_record(record, lookup).items()
    }


def compression_ratio(
    record: VisitRecord | Mapping[str, Any], *, lookup: Optional[PurposeLookup] = None
) -> float:
    """Fraction of the JSON size saved by the compact form.

    Returns:
        Value below 1.0; negative when the compact form is larger
    """
    original = json_size(record)
    return (original - encoded_size(record, lookup=lookup)) / original
