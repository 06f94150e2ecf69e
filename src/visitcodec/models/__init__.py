"""Pydantic record models for visitcodec.

This module provides the VisitRecord and CompactObject models and the field
helpers that describe the wire shape of each record field.
"""

from __future__ import annotations

from .fields import FixedHex, GateNumber, HexNumber, HexText, WireKind
from .record import CompactObject, VisitRecord

__all__ = [
    "VisitRecord",
    "CompactObject",
    "FixedHex",
    "HexText",
    "HexNumber",
    "GateNumber",
    "WireKind",
]
