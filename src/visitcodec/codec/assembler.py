"""Record assembler and disassembler.

This is the single field-transform layer shared by the string and object
framings: a record is broken into one hex value per field, and a set of hex
values is assembled back into a record, always in the schema field order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional

from pydantic import ValidationError

from ..exceptions import DecodeError, EncodeError
from ..models.record import VisitRecord
from . import transforms
from .lookup import DEFAULT_PURPOSE_LOOKUP, PurposeLookup
from .schema import RecordSchema

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldTransform:
    """Encode/decode pair for one record field."""

    encode: Callable[[Any], str]
    decode: Callable[[str], Any]


def build_field_transforms(lookup: PurposeLookup) -> Dict[str, FieldTransform]:
    """Build the transform table for every VisitRecord field.

    Args:
        lookup: Purpose table used by the purpose_of_visit field

    Returns:
        Mapping of field name -> FieldTransform
    """

    def encode_purpose(purpose: str) -> str:
        if lookup.is_reserved(purpose):
            raise EncodeError(
                f"purpose {purpose!r} is a reserved code for {lookup.to_label(purpose)!r}"
            )
        return transforms.text_to_hex(lookup.to_code(purpose))

    def decode_purpose(value: str) -> str:
        return lookup.to_label(transforms.hex_to_text(value))

    text = FieldTransform(transforms.text_to_hex, transforms.hex_to_text)
    gates = FieldTransform(transforms.gates_to_hex, transforms.hex_to_gates)

    return {
        "identity_number": FieldTransform(
            transforms.encode_identity, transforms.decode_identity
        ),
        "fullname": text,
        "vehicle_plate_number": FieldTransform(
            transforms.encode_vehicle_plate, transforms.decode_vehicle_plate
        ),
        "purpose_of_visit": FieldTransform(encode_purpose, decode_purpose),
        "destination_name": text,
        "allowed_gate_for_enter": gates,
        "allowed_gate_for_exit": gates,
        "visit_id": FieldTransform(transforms.strip_uuid, transforms.decode_uuid),
        "transit_at": FieldTransform(transforms.int_to_hex, transforms.hex_to_int),
        "visited_gate_4": FieldTransform(transforms.bool_to_code, transforms.code_to_bool),
        "notes": text,
    }


def coerce_record(record: VisitRecord | Mapping[str, Any]) -> VisitRecord:
    """Validate a mapping into a VisitRecord at the encode boundary.

    Raises:
        EncodeError: If the value is not a valid visit record
    """
    if isinstance(record, VisitRecord):
        return record

    if not isinstance(record, Mapping):
        raise EncodeError(
            f"expected VisitRecord or mapping, got {type(record).__name__}"
        )

    try:
        return VisitRecord.model_validate(dict(record))
    except ValidationError as err:
        raise EncodeError(f"Invalid visit record: {err}") from err


def disassemble_record(
    record: VisitRecord | Mapping[str, Any],
    lookup: Optional[PurposeLookup] = None,
) -> Dict[str, str]:
    """Encode every field of a record to hex.

    Args:
        record: VisitRecord instance or mapping with all 11 fields
        lookup: Purpose table (default table if omitted)

    Returns:
        Ordered mapping of field name -> hex value, in wire order

    Raises:
        EncodeError: If the record or any field value is invalid
    """
    record = coerce_record(record)
    field_transforms = build_field_transforms(lookup or DEFAULT_PURPOSE_LOOKUP)
    schema = RecordSchema.from_model(VisitRecord)

    encoded: Dict[str, str] = {}
    for field_spec in schema.fields:
        value = getattr(record, field_spec.name)
        try:
            encoded[field_spec.name] = field_transforms[field_spec.name].encode(value)
        except EncodeError as err:
            raise EncodeError(f"Field {field_spec.name}: {err}") from err

    return encoded


def assemble_record(
    fields: Mapping[str, str],
    lookup: Optional[PurposeLookup] = None,
) -> VisitRecord:
    """Decode hex field values back into a VisitRecord.

    Args:
        fields: Mapping of field name -> hex value
        lookup: Purpose table (default table if omitted)

    Returns:
        Decoded VisitRecord

    Raises:
        DecodeError: If a field is missing, malformed, or the record is invalid
    """
    field_transforms = build_field_transforms(lookup or DEFAULT_PURPOSE_LOOKUP)
    schema = RecordSchema.from_model(VisitRecord)

    missing = [name for name in schema.names if name not in fields]
    if missing:
        raise DecodeError(f"Missing fields: {', '.join(missing)}")

    field_values: Dict[str, Any] = {}
    for field_spec in schema.fields:
        try:
            field_values[field_spec.name] = field_transforms[field_spec.name].decode(
                fields[field_spec.name]
            )
        except DecodeError as err:
            raise DecodeError(f"Field {field_spec.name}: {err}") from err

    try:
        record = VisitRecord(**field_values)
    except ValidationError as e:
        raise DecodeError(f"Failed to construct VisitRecord: {e}") from e

    logger.debug("Assembled visit record %s", record.visit_id)
    return record
