"""Separator framing for compact strings.

Encoded fields are joined with the two hex characters "1c" (the ASCII file
separator). Every field is itself written in hex, so the separator sequence
can also appear inside a field. Splitting therefore follows the record
layout instead of a plain ``str.split``:

- FIXED fields are taken by width
- TEXT fields end at the first separator at an even offset (hex pairs)
- NUMBER fields try each following separator, leftmost first, until the
  rest of the string splits cleanly

Text fields always have even length and cannot hold "1c" at an even offset
unless the text contains the separator character itself, so every record
whose text avoids that character splits in exactly one way.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List, Sequence

from ..constants import SEPARATOR
from ..exceptions import FramingError
from ..models.fields import WireKind

if TYPE_CHECKING:
    from ..codec.schema import FieldSpec


def join_fields(fields: Iterable[str], *, separator: str = SEPARATOR) -> str:
    """Join encoded fields into a compact string.

    Example:
        >>> join_fields(["04d649", "4a4f"])
        '04d6491c4a4f'
    """
    return separator.join(fields)


def split_fields(
    compact: str,
    layout: Sequence[FieldSpec],
    *,
    separator: str = SEPARATOR,
) -> List[str]:
    """Split a compact string into exactly one segment per layout field.

    Args:
        compact: Compact string to split
        layout: Field specs in wire order
        separator: Field separator

    Returns:
        Encoded field segments in wire order

    Raises:
        FramingError: If the string does not split into ``len(layout)`` fields
    """
    if not isinstance(compact, str):
        raise FramingError(f"Compact value must be a string, got {type(compact).__name__}")
    if not layout:
        raise FramingError("Cannot split without a field layout")

    try:
        return _split(compact, 0, tuple(layout), separator)
    except FramingError as err:
        raise FramingError(
            f"Compact string does not split into {len(layout)} fields: {err}"
        ) from err


def _split(
    compact: str, position: int, layout: Sequence[FieldSpec], separator: str
) -> List[str]:
    spec = layout[0]
    rest = layout[1:]

    if not rest:
        return [_last_segment(compact, position, spec, separator)]

    if spec.kind is WireKind.FIXED:
        end = position + (spec.width or 0)
        if not compact.startswith(separator, end):
            raise FramingError(f"no separator after field {spec.name} at offset {end}")
        return [compact[position:end]] + _split(compact, end + len(separator), rest, separator)

    if spec.kind is WireKind.TEXT:
        end = _find_aligned(compact, position, separator)
        if end < 0:
            raise FramingError(f"no separator after field {spec.name}")
        return [compact[position:end]] + _split(compact, end + len(separator), rest, separator)

    # NUMBER: at least one digit, then the first separator that lets the rest split
    end = compact.find(separator, position + 1)
    while end >= 0:
        try:
            tail = _split(compact, end + len(separator), rest, separator)
        except FramingError:
            end = compact.find(separator, end + 1)
            continue
        return [compact[position:end]] + tail

    raise FramingError(f"no usable separator after field {spec.name}")


def _last_segment(compact: str, position: int, spec: FieldSpec, separator: str) -> str:
    segment = compact[position:]

    if spec.kind is WireKind.FIXED and len(segment) != spec.width:
        raise FramingError(
            f"field {spec.name} must be {spec.width} characters, got {len(segment)}"
        )
    if spec.kind is WireKind.TEXT:
        if len(segment) % 2:
            raise FramingError(f"last field {spec.name} has odd length {len(segment)}")
        if _find_aligned(compact, position, separator) >= 0:
            raise FramingError(f"extra separator in last field {spec.name}")
    if spec.kind is WireKind.NUMBER and not segment:
        raise FramingError(f"field {spec.name} is empty")

    return segment


def _find_aligned(compact: str, start: int, separator: str) -> int:
    """Find the first separator at an even offset from ``start``, or -1."""
    index = compact.find(separator, start)
    while index >= 0 and (index - start) % 2:
        index = compact.find(separator, index + 1)
    return index
