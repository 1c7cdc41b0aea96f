#!/usr/bin/env python3
"""
Whitwell CLI

Command-line interface for converting coordinates to Whitwell names and back.

Usage:
    whitwell encode 37.37N 122.03W
    whitwell encode 37.37 -122.03
    whitwell decode "Feiro Nyvout"
    whitwell decode "Isilu Buban" --signed
    whitwell --table

Options:
    --signed          Print signed numbers instead of hemisphere letters
    --table           Show the transliteration table
    -v, --verbose     Log each conversion step
"""

import argparse
import logging
import sys

from whitwell import __version__
from whitwell.core import from_whitwell, scheme, to_whitwell
from whitwell.errors import WhitwellError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="whitwell",
        description=(
            "Whitwell's rational geographic nomenclature\n\n"
            "Turns a latitude/longitude pair into a two-part name, and a\n"
            "two-part name back into a latitude/longitude pair."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  whitwell encode 37.37N 122.03W       # Sunnyvale, CA\n"
            "  whitwell encode -33.87 151.21        # signed form\n"
            "  whitwell decode \"Feiro Nyvout\"       # Washington, DC\n"
            "  whitwell decode \"Isilu Buban\" --signed\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--table",
        action="store_true",
        help="Show the transliteration table and exit",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log each conversion step to stderr",
    )

    commands = parser.add_subparsers(dest="command")

    encode = commands.add_parser("encode", help="Name a latitude/longitude pair")
    encode.add_argument("latitude", help="Latitude, signed or with a trailing N/S")
    encode.add_argument("longitude", help="Longitude, signed or with a trailing E/W")

    decode = commands.add_parser("decode", help="Turn a name back into coordinates")
    decode.add_argument(
        "name",
        nargs="+",
        help="The two-word name (quoted, or as two arguments)",
    )
    decode.add_argument(
        "--signed",
        action="store_true",
        help="Print signed numbers instead of trailing hemisphere letters",
    )
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.table:
        _show_table()
        return 0

    if args.command is None:
        parser.print_help()
        print("\nError: No command given. Use 'encode' or 'decode'.")
        return 1

    try:
        if args.command == "encode":
            for name in to_whitwell(args.latitude, args.longitude):
                print(name)
        else:
            lat, lon = from_whitwell(" ".join(args.name), signed=args.signed)
            print(f"{lat} {lon}")
    except WhitwellError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1
    return 0


def _show_table():
    """Display the digit-to-letter table."""
    print("\nWhitwell Transliteration Table:")
    print("-" * 40)
    print(f"  {'digit':>5}  {'vowel':<6} {'consonant':<9}")
    for digit, letters in scheme().items():
        print(f"  {digit:>5}  {letters['vowel']:<6} {letters['consonant']:<9}")
    print()


if __name__ == "__main__":
    sys.exit(main())
