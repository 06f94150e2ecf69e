"""Utility functions for visitcodec.

This module provides size and compression calculations.
"""

from __future__ import annotations

from .sizing import compression_ratio, encoded_size, field_sizes, json_size

__all__ = [
    "encoded_size",
    "json_size",
    "field_sizes",
    "compression_ratio",
]
