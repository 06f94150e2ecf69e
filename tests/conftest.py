"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import Any

import pytest

from visitcodec import VisitRecord

# Hex form of each field of the sample record, in wire order
SAMPLE_FIELDS = {
    "identity_number": "04d649",
    "fullname": "4a4f2a2a4c20444f45",
    "vehicle_plate_number": "4245313139394141",
    "purpose_of_visit": "536572766963652041432052756d6168",
    "destination_name": "41412d31",
    "allowed_gate_for_enter": "03",
    "allowed_gate_for_exit": "0c",
    "visit_id": "f3d5c6a81eab4b1aa8d4092cf15b65e9",
    "transit_at": "68ca5de9",
    "visited_gate_4": "00",
    "notes": "6c6f72656d20697073756d",
}


@pytest.fixture
def sample_payload() -> dict[str, Any]:
    """Sample visit record as plain data."""
    return {
        "identity_number": "317**********001",
        "fullname": "JO**L DOE",
        "vehicle_plate_number": "BE 1199 AA",
        "purpose_of_visit": "Service AC Rumah",
        "destination_name": "AA-1",
        "allowed_gate_for_enter": [1, 2],
        "allowed_gate_for_exit": [3, 4],
        "visit_id": "f3d5c6a8-1eab-4b1a-a8d4-092cf15b65e9",
        "transit_at": 1758092777,
        "visited_gate_4": False,
        "notes": "lorem ipsum",
    }


@pytest.fixture
def sample_record(sample_payload: dict[str, Any]) -> VisitRecord:
    """Sample visit record."""
    return VisitRecord(**sample_payload)


@pytest.fixture
def sample_fields() -> dict[str, str]:
    """Hex fields of the sample record."""
    return dict(SAMPLE_FIELDS)


@pytest.fixture
def sample_compact() -> str:
    """Compact string of the sample record."""
    return "1c".join(SAMPLE_FIELDS.values())
