"""
query-security-txt - print the security.txt record embedded in a program binary.

    query-security-txt program.so
    query-security-txt program.so --json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from security_txt.reader import SecurityTxtReader
from security_txt.spec import MAX_FILE_SIZE

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="query-security-txt",
        description="Find and display the security.txt record inside a binary.",
    )
    parser.add_argument("path", help="Program binary or dumped program data")
    parser.add_argument("--json", action="store_true", default=False,
                        help="Print the record as JSON")
    parser.add_argument("--max-size", type=int, default=MAX_FILE_SIZE,
                        help="Refuse files larger than this many bytes")
    parser.add_argument("--log-level", default="warning")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper())

    logger.debug("Reading %s (max %d bytes)", args.path, args.max_size)
    try:
        record = SecurityTxtReader.read(args.path, max_size=args.max_size)
    except (ValueError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    logger.debug("Parsed security.txt for %s", record.name)

    if args.json:
        print(json.dumps(record.to_dict(), indent=2))
    else:
        print(record)
    return 0


if __name__ == "__main__":
    sys.exit(main())
