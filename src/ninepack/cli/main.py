"""Main CLI entry point for ninepack."""

from __future__ import annotations

import argparse
import logging
import re
import sys

from .. import __version__
from ..compare import compare, format_report, standard_scenarios
from ..exceptions import NinepackError
from ..transport import deserialize, serialize


def parse_numbers(text: str) -> list[int]:
    """Parse integers separated by commas and/or whitespace.

    Raises:
        ValueError: If a token is not an integer
    """
    tokens = [token for token in re.split(r"[\s,]+", text.strip()) if token]
    try:
        return [int(token) for token in tokens]
    except ValueError as err:
        raise ValueError(f"Invalid integer list: {text!r}") from err


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ninepack command."""
    parser = argparse.ArgumentParser(
        prog="ninepack",
        description="ninepack: 9-bit integer packing codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ninepack --encode 5,17,300            Pack integers to base64 text
  ninepack --decode AAECgA==            Unpack base64 text to integers
  ninepack --compare "1 2 3 250"        Compare with comma-separated text
  ninepack --benchmark --seed 7         Run the standard scenarios
        """,
    )

    commands = parser.add_mutually_exclusive_group()
    commands.add_argument("--encode", metavar="NUMBERS", help="Integers to pack (comma or space separated)")
    commands.add_argument("--decode", metavar="TEXT", help="Base64 text to unpack")
    commands.add_argument("--compare", metavar="NUMBERS", help="Report size against naive text")
    commands.add_argument("--benchmark", action="store_true", help="Report on the standard scenarios")

    parser.add_argument("--strict", action="store_true", help="Reject out-of-range values and short payloads")
    parser.add_argument("--urlsafe", action="store_true", help="Use the URL-safe base64 alphabet")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for --benchmark")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"ninepack {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the ninepack CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    mode = "strict" if args.strict else "truncate"

    try:
        if args.encode is not None:
            print(serialize(parse_numbers(args.encode), mode=mode, urlsafe=args.urlsafe))
            return 0

        if args.decode is not None:
            numbers = deserialize(args.decode, strict=args.strict, urlsafe=args.urlsafe)
            print(",".join(str(n) for n in numbers))
            return 0

        if args.compare is not None:
            numbers = parse_numbers(args.compare)
            print(format_report(compare(numbers, "command line", mode=mode, urlsafe=args.urlsafe)))
            return 0

        if args.benchmark:
            for description, numbers in standard_scenarios(args.seed):
                print(format_report(compare(numbers, description, mode=mode, urlsafe=args.urlsafe)))
                print()
            return 0
    except (NinepackError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
