"""Record analysis CLI command."""

from __future__ import annotations

from typing import Optional

from ..codec.lookup import PurposeLookup
from ..models.record import VisitRecord
from ..utils.sizing import compression_ratio, encoded_size, field_sizes, json_size


def analyze_record(record: VisitRecord, lookup: Optional[PurposeLookup] = None) -> None:
    """Print a per-field size breakdown of a record's compact form.

    Args:
        record: Record to analyze
        lookup: Purpose table (default table if omitted)
    """
    sizes = field_sizes(record, lookup=lookup)
    compact_bytes = encoded_size(record, lookup=lookup)
    original_bytes = json_size(record)

    print("|" * 7, "visitcodec: Compact Visit Record Codec", "|" * 7)
    print(f"Visit {record.visit_id}")
    print("Field sizes are in hex characters (2 per byte).")
    print()

    print(f"{'-' * 27} Fields {'-' * 27}")
    for i, (field_name, width) in enumerate(sizes.items(), 1):
        field_desc = f"{i}. {field_name}"
        dots = "." * max(1, 54 - len(field_desc) - len(str(width)))
        print(f"        {field_desc}{dots}{width}")
    separators = len(sizes) - 1
    print(f"        separators{'.' * (44 - len(str(separators * 2)))}{separators * 2}")
    print()

    print(f"{'=' * 24} Summary {'=' * 24}")
    print(f"Original size (JSON): {original_bytes} bytes")
    print(f"Compact size: {compact_bytes} bytes")
    print(f"Compression ratio: {compression_ratio(record, lookup=lookup) * 100:.1f}%")
    print(f"Size reduction: {original_bytes - compact_bytes} bytes saved")
    print()
