"""Purpose-of-visit lookup table.

Known purpose labels are replaced by short codes before encoding and
restored after decoding. Unknown purposes pass through unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from ..constants import DEFAULT_PURPOSE_CODES, SEPARATOR
from ..exceptions import SchemaError
from .transforms import to_single_byte

SEPARATOR_CHAR = chr(int(SEPARATOR, 16))


@dataclass(frozen=True)
class PurposeLookup:
    """Immutable bidirectional mapping between purpose labels and codes.

    Attributes:
        codes: Mapping of label -> code
        labels: Mapping of code -> label (derived)

    Example:
        >>> lookup = PurposeLookup({"Delivery": "D1"})
        >>> lookup.to_code("Delivery")
        'D1'
        >>> lookup.to_label("D1")
        'Delivery'
        >>> lookup.to_code("Custom Reason")
        'Custom Reason'
    """

    codes: Mapping[str, str]
    labels: Mapping[str, str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        codes = dict(self.codes)
        labels: dict[str, str] = {}

        for label, code in codes.items():
            if not isinstance(label, str) or not isinstance(code, str):
                raise SchemaError(f"Purpose label and code must be strings: {label!r} -> {code!r}")
            if not label or not code:
                raise SchemaError(f"Purpose label and code must be non-empty: {label!r} -> {code!r}")
            if to_single_byte(code) != code or SEPARATOR_CHAR in code:
                raise SchemaError(
                    f"Purpose code {code!r} must be single-byte text without the separator"
                )
            if code in labels:
                raise SchemaError(
                    f"Purpose code {code!r} is used by both {labels[code]!r} and {label!r}"
                )
            labels[code] = label

        object.__setattr__(self, "codes", MappingProxyType(codes))
        object.__setattr__(self, "labels", MappingProxyType(labels))

    def has_label(self, label: str) -> bool:
        return label in self.codes

    def is_reserved(self, purpose: str) -> bool:
        """Check whether an unknown purpose would be read back as a known label.

        The purpose is compared in its encoded form, so text that only becomes
        a code after single-byte replacement is reserved too.
        """
        return purpose not in self.codes and to_single_byte(purpose) in self.labels

    def to_code(self, purpose: str) -> str:
        return self.codes.get(purpose, purpose)

    def to_label(self, code: str) -> str:
        return self.labels.get(code, code)


DEFAULT_PURPOSE_LOOKUP = PurposeLookup(DEFAULT_PURPOSE_CODES)
