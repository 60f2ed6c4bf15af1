"""
Command-line interface for gas amounts.

Usage:
    python -m unc_gas parse "1.5 Tgas"
    python -m unc_gas format 1500000000000
    python -m unc_gas units
"""

import argparse
import logging
import sys

from .cli import add_gas_argument, gas_count_type, units_help
from .units import UNIT_TOKENS, unit_tokens


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Parse and display gas amounts", prog="python -m unc_gas"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    parse_parser = subparsers.add_parser(
        "parse", help="Print the base-unit count and display string of an amount with unit"
    )
    add_gas_argument(parse_parser, "amount", help="Gas amount, e.g. '1.5 Tgas'")

    format_parser = subparsers.add_parser(
        "format", help="Print the display string of a base-unit count"
    )
    format_parser.add_argument("gas", type=gas_count_type, metavar="COUNT", help="Number of whole gas units")

    subparsers.add_parser("units", help="List accepted unit tokens")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.command == "parse":
        print(f"{args.amount.as_gas()} gas ({args.amount})")
    elif args.command == "format":
        print(args.gas)
    elif args.command == "units":
        for token in unit_tokens():
            print(f"{token:<8} {UNIT_TOKENS[token]}")
        print(units_help())
    else:
        parser.print_help()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
