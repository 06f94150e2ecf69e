"""Main CLI entry point for visitcodec."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

from .. import __version__
from ..codec.core import VisitCodec
from ..codec.lookup import PurposeLookup
from ..exceptions import VisitCodecError
from ..models.record import VisitRecord
from .analyze import analyze_record

logger = logging.getLogger(__name__)


def _read_json(source: str) -> Any:
    """Load JSON from a file path, or from stdin when ``source`` is "-"."""
    if source == "-":
        return json.load(sys.stdin)

    file_path = Path(source)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")
    return json.loads(file_path.read_text(encoding="utf-8"))


def _load_lookup(source: Optional[str]) -> Optional[PurposeLookup]:
    if source is None:
        return None

    table = _read_json(source)
    if not isinstance(table, dict):
        raise ValueError(f"Purpose table must be a JSON object, got {type(table).__name__}")
    logger.debug("Loaded %d purpose codes from %s", len(table), source)
    return PurposeLookup(table)


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the visitcodec CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        prog="visitcodec",
        description="visitcodec: Compact Visit Record Codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  visitcodec --encode record.json           Encode a JSON record
  visitcodec --decode 04d6491c...           Decode a compact string
  visitcodec --encode record.json --object  Encode to a JSON compact object
  visitcodec --decode compact.json --object Decode a JSON compact object
  visitcodec --analyze record.json          Show field sizes and compression
        """,
    )

    action = parser.add_mutually_exclusive_group()
    action.add_argument(
        "--encode",
        metavar="FILE",
        type=str,
        help="Encode a JSON visit record ('-' reads stdin)",
    )
    action.add_argument(
        "--decode",
        metavar="VALUE",
        type=str,
        help="Decode a compact string (a JSON file with --object)",
    )
    action.add_argument(
        "--analyze",
        metavar="FILE",
        type=str,
        help="Show field sizes and compression for a JSON visit record",
    )

    parser.add_argument(
        "--object",
        action="store_true",
        help="Use the keyed compact object form instead of the compact string",
    )
    parser.add_argument(
        "--purpose-table",
        metavar="FILE",
        type=str,
        help="JSON object of purpose label -> code replacing the built-in table",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"visitcodec {__version__}",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # If no command specified, show help
    if args.encode is None and args.decode is None and args.analyze is None:
        parser.print_help()
        return 0

    try:
        codec = VisitCodec(_load_lookup(args.purpose_table))

        if args.encode is not None:
            record = _read_json(args.encode)
            if args.object:
                print(codec.encode_object(record).model_dump_json(indent=2))
            else:
                print(codec.encode(record))
            return 0

        if args.decode is not None:
            if args.object:
                decoded = codec.decode_object(_read_json(args.decode))
            else:
                decoded = codec.decode(args.decode.strip())
            print(decoded.model_dump_json(indent=2))
            return 0

        record = VisitRecord.model_validate(_read_json(args.analyze))
        analyze_record(record, codec.lookup)
        return 0
    except (VisitCodecError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
