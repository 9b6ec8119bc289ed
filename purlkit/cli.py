"""
Command-line entry point: prints the canonical form of one or more purls.

Usage:
    purlkit 'pkg:pypi/Django_Rest@1.0' 'pkg:github/ACME/Repo@main'
    purlkit --format json 'pkg:npm/foo@1.0?Arch=i386'
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from purlkit.config import CONFIG, OUTPUT_FORMATS
from purlkit.errors import MalformedPackageURLError
from purlkit.purl import parse
from purlkit.serialization import to_dict

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="purlkit",
        description="Validate package URLs (purls) and print their canonical form.",
    )
    parser.add_argument("purls", nargs="+", metavar="PURL", help="A package URL to canonicalize.")
    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=CONFIG["output_format"],
        help="Output format (default from [tool.purlkit] output_format).",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Runs the CLI and returns the process exit status."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else CONFIG["logging_level_int"],
        format="%(asctime)s-%(levelname)s-%(message)s",
    )

    for raw in args.purls:
        try:
            purl = parse(raw)
        except MalformedPackageURLError as e:
            logger.info(f"Malformed purl {raw!r}: {e.kind.value}")
            if args.format == "json":
                print(json.dumps({"error": {"kind": e.kind.value, "message": e.message}}))
            print(f"error: {e}", file=sys.stderr)
            return 1

        if args.format == "json":
            print(json.dumps(to_dict(purl)))
        else:
            print(purl.to_string())
    return 0


if __name__ == "__main__":
    sys.exit(main())
