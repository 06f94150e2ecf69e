"""Compact string framing for visitcodec.

This module joins encoded fields with the separator and splits compact
strings back into their fields.
"""

from __future__ import annotations

from .basic import join_fields, split_fields

__all__ = [
    "join_fields",
    "split_fields",
]
