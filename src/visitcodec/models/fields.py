"""Field helpers describing the wire shape of record fields.

Each helper wraps Pydantic's Field() and stores the wire shape of the field
as extra metadata. The metadata is read back by RecordSchema to split a
compact string into its fields.
"""

from __future__ import annotations

import enum
from typing import Annotated, Any, cast

from pydantic import Field
from pydantic.fields import FieldInfo

from ..constants import MAX_GATE_COUNT


class WireKind(str, enum.Enum):
    """Shape of an encoded field inside the compact string."""

    FIXED = "fixed"  # exactly ``width`` hex characters
    TEXT = "text"  # hex pairs, a separator can only start at an even offset
    NUMBER = "number"  # unpadded hex of any length


# A single gate, numbered from 1
GateNumber = Annotated[int, Field(ge=1, le=MAX_GATE_COUNT)]


def FixedHex(*, width: int, **kwargs: Any) -> FieldInfo:
    """Create a field encoded as exactly ``width`` hex characters.

    Args:
        width: Width of the encoded field in hex characters
        **kwargs: Additional Field() arguments (pattern, description, etc.)

    Returns:
        Pydantic FieldInfo suitable for use as a field default/metadata.

    Example:
        >>> class Ticket(BaseModel):
        ...     code: str = FixedHex(width=4)
    """
    if width <= 0:
        raise ValueError("width must be positive")

    return cast(
        FieldInfo,
        Field(json_schema_extra={"wire": WireKind.FIXED.value, "width": width}, **kwargs),
    )


def HexText(**kwargs: Any) -> FieldInfo:
    """Create a free-text field encoded as two hex characters per character.

    The encoded length is always even, so a separator can only start at an
    even offset inside the field.
    """
    return cast(FieldInfo, Field(json_schema_extra={"wire": WireKind.TEXT.value}, **kwargs))


def HexNumber(**kwargs: Any) -> FieldInfo:
    """Create an integer field encoded as variable-length hex without padding."""
    return cast(FieldInfo, Field(json_schema_extra={"wire": WireKind.NUMBER.value}, **kwargs))
