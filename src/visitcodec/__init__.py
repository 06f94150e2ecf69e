"""visitcodec: Compact Visit Record Codec

A Python library that turns a visitor registration record into a short
delimited hex string for constrained channels (QR codes, short messages)
and back again.

Key Features:
- Pydantic-based record model validated at the encode boundary
- Fixed 11-field layout joined with the "1c" (file separator) byte
- Purpose-of-visit lookup table with pass-through for unknown purposes
- String and keyed-object framings sharing one set of field transforms

Lossy transforms:
- vehicle plate spacing is normalized
- gate order and duplicates are dropped
- identity middle digits are replaced by a fixed "*" run
- text outside the single-byte range is replaced by "?"

Quick Start:
    >>> from visitcodec import VisitRecord, encode, decode
    >>>
    >>> record = VisitRecord(
    ...     identity_number="317**********001",
    ...     fullname="JO**L DOE",
    ...     vehicle_plate_number="BE 1199 AA",
    ...     purpose_of_visit="Service AC Rumah",
    ...     destination_name="AA-1",
    ...     allowed_gate_for_enter=[1, 2],
    ...     allowed_gate_for_exit=[3, 4],
    ...     visit_id="f3d5c6a8-1eab-4b1a-a8d4-092cf15b65e9",
    ...     transit_at=1758092777,
    ...     visited_gate_4=False,
    ...     notes="lorem ipsum",
    ... )
    >>> compact = encode(record)
    >>> decode(compact) == record.canonical()
    True
"""

from __future__ import annotations

import logging

from .codec import (
    DEFAULT_PURPOSE_LOOKUP,
    PurposeLookup,
    VisitCodec,
    decode,
    decode_object,
    encode,
    encode_object,
)
from .codec.transforms import (
    binary_to_gates,
    bool_to_code,
    code_to_bool,
    decode_identity,
    encode_identity,
    format_uuid,
    format_vehicle_plate,
    gates_to_binary,
    hex_to_text,
    text_to_hex,
)
from .exceptions import (
    DecodeError,
    EncodeError,
    FramingError,
    MalformedInputError,
    SchemaError,
    VisitCodecError,
)
from .models import CompactObject, VisitRecord
from .utils import compression_ratio, encoded_size, field_sizes, json_size

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core API
    "VisitRecord",
    "CompactObject",
    "VisitCodec",
    "encode",
    "decode",
    "encode_object",
    "decode_object",
    # Lookup
    "PurposeLookup",
    "DEFAULT_PURPOSE_LOOKUP",
    # Field transforms
    "text_to_hex",
    "hex_to_text",
    "gates_to_binary",
    "binary_to_gates",
    "bool_to_code",
    "code_to_bool",
    "encode_identity",
    "decode_identity",
    "format_vehicle_plate",
    "format_uuid",
    # Exceptions
    "VisitCodecError",
    "MalformedInputError",
    "SchemaError",
    "EncodeError",
    "DecodeError",
    "FramingError",
    # Sizing
    "encoded_size",
    "json_size",
    "field_sizes",
    "compression_ratio",
    # Version
    "__version__",
]
