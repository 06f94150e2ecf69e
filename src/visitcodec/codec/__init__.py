"""Compact hex codec for visit records.

This module provides encoding and decoding between VisitRecord and its
compact string and compact object forms.
"""

from __future__ import annotations

from .assembler import assemble_record, disassemble_record
from .core import VisitCodec
from .decoder import decode, decode_object
from .encoder import encode, encode_object
from .lookup import DEFAULT_PURPOSE_LOOKUP, PurposeLookup
from .schema import FieldSpec, RecordSchema

__all__ = [
    "encode",
    "decode",
    "encode_object",
    "decode_object",
    "VisitCodec",
    "PurposeLookup",
    "DEFAULT_PURPOSE_LOOKUP",
    "assemble_record",
    "disassemble_record",
    "RecordSchema",
    "FieldSpec",
]
