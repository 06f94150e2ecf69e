"""Exception hierarchy for visitcodec.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from VisitCodecError for easy catching of any
visitcodec-specific error.
"""

from __future__ import annotations


class VisitCodecError(Exception):
    """Base exception for all visitcodec errors."""

    pass


class SchemaError(VisitCodecError):
    """Raised when a lookup table or record layout is invalid.

    Examples:
        - Two purpose labels share the same code
        - Empty label or code in a purpose table
        - Record field without wire metadata
    """

    pass


class MalformedInputError(VisitCodecError):
    """Raised when a record or compact value does not have the expected shape."""

    pass


class EncodeError(MalformedInputError):
    """Raised when encoding a visit record fails.

    Examples:
        - Identity number without 3 leading and 3 trailing digits
        - Gate number outside 1-8
        - Negative transit timestamp
        - Purpose text that collides with a reserved purpose code
        - Encoded field that would be split apart by the separator
    """

    pass


class DecodeError(MalformedInputError):
    """Raised when decoding a compact value fails.

    Examples:
        - Non-hex characters in a hex field
        - Identity fragment wider than 6 decimal digits
        - Missing key in a compact object
    """

    pass


class FramingError(DecodeError):
    """Raised when a compact string cannot be split into its fields.

    Examples:
        - Fewer than 11 separator-delimited segments
        - Extra separators after the last field
        - Fixed-width field that is too short
    """

    pass
