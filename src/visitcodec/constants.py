"""Wire constants for the compact visit record format."""

from __future__ import annotations

# ASCII "file separator" control character, written as its two hex digits
SEPARATOR = "1c"

# Fixed widths in hex characters
IDENTITY_HEX_WIDTH = 6
GATES_HEX_WIDTH = 2
VISIT_ID_HEX_WIDTH = 32
BOOLEAN_HEX_WIDTH = 2

IDENTITY_DIGITS = 6
IDENTITY_KEPT_DIGITS = 3
MAX_IDENTITY_VALUE = 10**IDENTITY_DIGITS - 1

REDACTION_MARKER = "*"
REDACTION_LENGTH = 10

MAX_GATE_COUNT = 8

TRUE_CODE = "01"
FALSE_CODE = "00"

# Characters above the single-byte range are encoded as this one
REPLACEMENT_CHAR = "?"

DEFAULT_PURPOSE_CODES = {
    "Bertamu aja": "POV 1",
    "Antar jemput warga": "POV 2",
    "Pengantaran Barang": "POV 3",
}

UUID_PATTERN = (
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)
