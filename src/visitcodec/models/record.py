"""Visit record models.

VisitRecord is the decoded, human-readable form of a visitor registration.
CompactObject holds the same 11 fields as hex strings, keyed by field name.
Field declaration order on VisitRecord is the wire order of the compact string.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from ..constants import (
    BOOLEAN_HEX_WIDTH,
    GATES_HEX_WIDTH,
    IDENTITY_HEX_WIDTH,
    UUID_PATTERN,
    VISIT_ID_HEX_WIDTH,
)
from .fields import FixedHex, GateNumber, HexNumber, HexText

if TYPE_CHECKING:
    from ..codec.lookup import PurposeLookup


class VisitRecord(BaseModel):
    """A visitor registration record.

    Example:
        >>> record = VisitRecord(
        ...     identity_number="317**********001",
        ...     fullname="JO**L DOE",
        ...     vehicle_plate_number="BE 1199 AA",
        ...     purpose_of_visit="Bertamu aja",
        ...     destination_name="AA-1",
        ...     allowed_gate_for_enter=[1, 2],
        ...     allowed_gate_for_exit=[3, 4],
        ...     visit_id="f3d5c6a8-1eab-4b1a-a8d4-092cf15b65e9",
        ...     transit_at=1758092777,
        ...     visited_gate_4=False,
        ...     notes="lorem ipsum",
        ... )
    """

    model_config = ConfigDict(
        frozen=True,
        # Forbid extra fields not defined in schema
        extra="forbid",
    )

    identity_number: str = FixedHex(width=IDENTITY_HEX_WIDTH)
    fullname: str = HexText()
    vehicle_plate_number: str = HexText()
    purpose_of_visit: str = HexText()
    destination_name: str = HexText()
    allowed_gate_for_enter: Tuple[GateNumber, ...] = FixedHex(width=GATES_HEX_WIDTH)
    allowed_gate_for_exit: Tuple[GateNumber, ...] = FixedHex(width=GATES_HEX_WIDTH)
    visit_id: str = FixedHex(width=VISIT_ID_HEX_WIDTH, pattern=UUID_PATTERN)
    transit_at: int = HexNumber(ge=0)
    visited_gate_4: bool = FixedHex(width=BOOLEAN_HEX_WIDTH)
    notes: str = HexText()

    def canonical(self, lookup: Optional[PurposeLookup] = None) -> VisitRecord:
        """Return the record as it comes back from an encode/decode round trip.

        Gates are sorted and de-duplicated, the vehicle plate is re-spaced,
        the identity middle digits are replaced by the redaction run, the visit
        id is lower-cased and text outside the single-byte range is replaced.

        Args:
            lookup: Purpose table used for encoding (default table if omitted)

        Returns:
            Canonicalized copy of the record
        """
        # Import here to avoid circular dependency
        from ..codec.lookup import DEFAULT_PURPOSE_LOOKUP
        from ..codec.transforms import (
            binary_to_gates,
            format_uuid,
            format_vehicle_plate,
            gates_to_binary,
            redact_identity,
            strip_uuid,
            strip_vehicle_plate,
            to_single_byte,
        )

        lookup = lookup or DEFAULT_PURPOSE_LOOKUP
        purpose = self.purpose_of_visit
        if not lookup.has_label(purpose):
            purpose = to_single_byte(purpose)

        plate = to_single_byte(strip_vehicle_plate(self.vehicle_plate_number))

        return self.model_copy(
            update={
                "identity_number": redact_identity(self.identity_number),
                "fullname": to_single_byte(self.fullname),
                "vehicle_plate_number": format_vehicle_plate(plate),
                "purpose_of_visit": purpose,
                "destination_name": to_single_byte(self.destination_name),
                "allowed_gate_for_enter": tuple(
                    binary_to_gates(gates_to_binary(self.allowed_gate_for_enter))
                ),
                "allowed_gate_for_exit": tuple(
                    binary_to_gates(gates_to_binary(self.allowed_gate_for_exit))
                ),
                "visit_id": format_uuid(strip_uuid(self.visit_id)),
                "notes": to_single_byte(self.notes),
            }
        )


class CompactObject(BaseModel):
    """Encoded visit record with each field kept under its own key.

    Every value is the hex form of the matching VisitRecord field.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    identity_number: str
    fullname: str
    vehicle_plate_number: str
    purpose_of_visit: str
    destination_name: str
    allowed_gate_for_enter: str
    allowed_gate_for_exit: str
    visit_id: str
    transit_at: str
    visited_gate_4: str
    notes: str
