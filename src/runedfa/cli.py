"""Command-line interface for runedfa."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import runedfa
from runedfa._utils import DEFAULT_VARIANT
from runedfa.enums import Variant
from runedfa.errors import MalformedEncodingError
from runedfa.tables import Tables, get_tables

_VARIANT_NAMES = [v.value for v in Variant]

logger = logging.getLogger(__name__)


def _check(
    name: str, data: bytes, tables: Tables, minimal: bool, count_only: bool
) -> bool:
    """Report on one input.  Returns ``False`` if it is malformed."""
    try:
        count = runedfa.count_codepoints(data, tables)
    except MalformedEncodingError as e:
        if minimal:
            print("invalid")
        else:
            print(f"{name}: malformed {tables.name} at byte {e.offset}")
        return False
    if minimal or count_only:
        print(count)
    else:
        print(f"{name}: valid {tables.name}, {count} codepoints")
    return True


def main(argv: list[str] | None = None) -> None:
    """Run the ``runedfa`` command-line tool.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    """
    parser = argparse.ArgumentParser(
        description="Validate, count and transcode UTF-8 family text."
    )
    parser.add_argument("files", nargs="*", help="Files to check (default: stdin)")
    parser.add_argument(
        "-e",
        "--encoding",
        default=DEFAULT_VARIANT.value,
        choices=_VARIANT_NAMES,
        help="Encoding variant (default: %(default)s)",
    )
    parser.add_argument(
        "--minimal",
        action="store_true",
        help="Output only the codepoint count, or 'invalid'",
    )
    parser.add_argument(
        "--count",
        action="store_true",
        help="Output only the codepoint count of each valid input",
    )
    parser.add_argument(
        "--utf16",
        metavar="OUT",
        type=Path,
        default=None,
        help="Write the UTF-16LE transcoding of a single input to OUT",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--version", action="version", version=f"runedfa {runedfa.__version__}"
    )

    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG)

    tables = get_tables(args.encoding)
    if args.utf16 is not None and len(args.files) > 1:
        parser.error("--utf16 takes exactly one input")

    inputs: list[tuple[str, bytes]] = []
    failed = False
    if args.files:
        for filepath in args.files:
            try:
                data = Path(filepath).read_bytes()
            except OSError as e:
                print(f"runedfa: {filepath}: {e}", file=sys.stderr)
                failed = True
                continue
            inputs.append((filepath, data))
    else:
        inputs.append(("stdin", sys.stdin.buffer.read()))

    for name, data in inputs:
        logger.debug("%s: %d bytes", name, len(data))
        if args.utf16 is not None:
            try:
                out = runedfa.to_utf16le(data, tables)
            except MalformedEncodingError as e:
                print(f"{name}: malformed {tables.name} at byte {e.offset}")
                failed = True
                continue
            args.utf16.write_bytes(out)
            if not args.minimal:
                print(f"{name}: wrote {len(out) // 2} UTF-16 code units to {args.utf16}")
        elif not _check(name, data, tables, args.minimal, args.count):
            failed = True

    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
