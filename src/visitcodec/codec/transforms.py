"""Primitive field transforms.

Each transform converts one native value to its hex representation or back.
Transforms are pure functions; encode-side failures raise EncodeError and
decode-side failures raise DecodeError.

Lossy transforms (documented, never reported as errors):
    - text outside the single-byte range is replaced by "?"
    - vehicle plate spacing is normalized
    - gate order and duplicates are dropped
    - identity middle digits are replaced by the redaction run
    - any boolean code other than "01" decodes as False
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, List

from ..constants import (
    FALSE_CODE,
    GATES_HEX_WIDTH,
    IDENTITY_DIGITS,
    IDENTITY_HEX_WIDTH,
    IDENTITY_KEPT_DIGITS,
    MAX_GATE_COUNT,
    MAX_IDENTITY_VALUE,
    REDACTION_LENGTH,
    REDACTION_MARKER,
    REPLACEMENT_CHAR,
    TRUE_CODE,
)
from ..exceptions import DecodeError, EncodeError

logger = logging.getLogger(__name__)

_HEX_PATTERN = re.compile(r"[0-9a-fA-F]*")
_IDENTITY_PATTERN = re.compile(
    rf"([0-9]{{{IDENTITY_KEPT_DIGITS}}}).*([0-9]{{{IDENTITY_KEPT_DIGITS}}})", re.DOTALL
)
_WHITESPACE_PATTERN = re.compile(r"\s+")
_PLATE_PATTERN = re.compile(r"([A-Za-z]+)([0-9]+)([A-Za-z]+)")
_UUID_PATTERN = re.compile(
    r"([0-9a-fA-F]{8})([0-9a-fA-F]{4})([0-9a-fA-F]{4})([0-9a-fA-F]{4})([0-9a-fA-F]{12})"
)


def require_hex(value: str) -> str:
    """Check that ``value`` only holds hex digits.

    Raises:
        DecodeError: If value is not a string of hex digits
    """
    if not isinstance(value, str):
        raise DecodeError(f"expected hex string, got {type(value).__name__}")
    if not _HEX_PATTERN.fullmatch(value):
        raise DecodeError(f"invalid hex value {value!r}")
    return value


# Text


def to_single_byte(text: str) -> str:
    """Replace characters above U+00FF with the replacement character."""
    return text.encode("latin-1", errors="replace").decode("latin-1")


def text_to_hex(text: str) -> str:
    """Encode text as two lowercase hex digits per character.

    Characters above U+00FF cannot be written as two hex digits and are
    replaced by "?" before encoding.

    Example:
        >>> text_to_hex("AA-1")
        '41412d31'
    """
    encoded = text.encode("latin-1", errors="replace")
    if any(ord(char) > 0xFF for char in text):
        logger.warning(
            "Replacing characters outside the single-byte range with %r in %r",
            REPLACEMENT_CHAR,
            text,
        )
    return encoded.hex()


def hex_to_text(value: str) -> str:
    """Decode hex pairs back to text.

    A trailing odd hex digit is dropped.

    Example:
        >>> hex_to_text("41412d31")
        'AA-1'
    """
    require_hex(value)
    usable = len(value) - len(value) % 2
    return bytes.fromhex(value[:usable]).decode("latin-1")


# Gates


def gates_to_binary(gates: Iterable[int]) -> int:
    """Convert gate numbers (1-based) to a bitmask where gate g sets bit g-1.

    Raises:
        EncodeError: If a gate is outside 1..MAX_GATE_COUNT

    Example:
        >>> gates_to_binary([2, 1, 2])
        3
    """
    mask = 0
    for gate in gates:
        if not 1 <= gate <= MAX_GATE_COUNT:
            raise EncodeError(f"gate {gate} out of bounds [1, {MAX_GATE_COUNT}]")
        mask |= 1 << (gate - 1)
    return mask


def binary_to_gates(mask: int) -> List[int]:
    """Convert a bitmask back to ascending gate numbers."""
    return [bit + 1 for bit in range(MAX_GATE_COUNT) if mask & (1 << bit)]


def gates_to_hex(gates: Iterable[int]) -> str:
    return f"{gates_to_binary(gates):0{GATES_HEX_WIDTH}x}"


def hex_to_gates(value: str) -> List[int]:
    return binary_to_gates(hex_to_int(value))


# Integers and booleans


def int_to_hex(value: int) -> str:
    """Format a non-negative integer as hex without padding.

    Raises:
        EncodeError: If value is negative
    """
    if value < 0:
        raise EncodeError(f"negative value {value} cannot be encoded")
    return f"{value:x}"


def hex_to_int(value: str) -> int:
    """Parse a hex string as an integer.

    Raises:
        DecodeError: If value is empty or not hex
    """
    require_hex(value)
    if not value:
        raise DecodeError("empty hex value")
    return int(value, 16)


def bool_to_code(flag: bool) -> str:
    return TRUE_CODE if flag else FALSE_CODE


def code_to_bool(code: str) -> bool:
    # Anything but the true code reads as False
    return code == TRUE_CODE


# Identity fragment


def encode_identity(identity: str) -> str:
    """Keep the first 3 and last 3 digits of an identity number as 6 hex digits.

    Redaction markers are removed first; everything between the kept digits
    is discarded.

    Raises:
        EncodeError: If fewer than 3 leading and 3 trailing digits remain

    Example:
        >>> encode_identity("317**********001")
        '04d649'
    """
    stripped = identity.replace(REDACTION_MARKER, "")
    match = _IDENTITY_PATTERN.fullmatch(stripped)
    if match is None:
        raise EncodeError(
            f"identity {identity!r} must start and end with "
            f"{IDENTITY_KEPT_DIGITS} digits"
        )

    digits = int(match.group(1) + match.group(2))
    return f"{digits:0{IDENTITY_HEX_WIDTH}x}"


def decode_identity(value: str) -> str:
    """Rebuild a redacted identity number from its 6 hex digits.

    Raises:
        DecodeError: If the value does not fit in 6 decimal digits

    Example:
        >>> decode_identity("04d649")
        '317**********001'
    """
    number = hex_to_int(value)
    if number > MAX_IDENTITY_VALUE:
        raise DecodeError(f"identity value {number} exceeds {IDENTITY_DIGITS} digits")

    digits = f"{number:0{IDENTITY_DIGITS}d}"
    head = digits[:IDENTITY_KEPT_DIGITS]
    tail = digits[IDENTITY_KEPT_DIGITS:]
    return f"{head}{REDACTION_MARKER * REDACTION_LENGTH}{tail}"


def redact_identity(identity: str) -> str:
    """Return the identity number in the form it has after a round trip."""
    return decode_identity(encode_identity(identity))


# Vehicle plate


def strip_vehicle_plate(plate: str) -> str:
    return _WHITESPACE_PATTERN.sub("", plate)


def format_vehicle_plate(plate: str) -> str:
    """Insert single spaces between the letter, digit and letter runs of a plate.

    Plates of any other shape are returned unchanged.

    Example:
        >>> format_vehicle_plate("BE1199AA")
        'BE 1199 AA'
    """
    match = _PLATE_PATTERN.fullmatch(plate)
    if match is None:
        logger.debug("Plate %r left unformatted", plate)
        return plate
    return " ".join(match.groups())


def encode_vehicle_plate(plate: str) -> str:
    return text_to_hex(strip_vehicle_plate(plate))


def decode_vehicle_plate(value: str) -> str:
    return format_vehicle_plate(hex_to_text(value))


# Visit identifier


def strip_uuid(value: str) -> str:
    """Remove hyphens and lower-case an identifier for the wire."""
    return value.replace("-", "").lower()


def format_uuid(value: str) -> str:
    """Insert hyphens into a 32 hex digit identifier (8-4-4-4-12).

    Values of any other shape are returned unchanged.

    Example:
        >>> format_uuid("f3d5c6a81eab4b1aa8d4092cf15b65e9")
        'f3d5c6a8-1eab-4b1a-a8d4-092cf15b65e9'
    """
    match = _UUID_PATTERN.fullmatch(value)
    if match is None:
        return value
    return "-".join(match.groups())


def decode_uuid(value: str) -> str:
    return format_uuid(require_hex(value))
