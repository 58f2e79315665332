"""
Command-line script to show information about the types of SIN
"""

import sys
import argparse

from typing import List, TextIO

from canada_sin import VERSION, SinType
from canada_sin.sintype import TYPES_BY_DIGIT
from canada_sin.app import setup_logging


def print_digits(out: TextIO):
    print(". Possible types by leading digit", file=out)
    for digit, types in TYPES_BY_DIGIT.items():
        print(f"  {digit}: " + ", ".join(t.label for t in types), file=out)


def print_types(out: TextIO):
    print(". Defined SIN types", file=out)
    for t in SinType:
        print(
            f"  {t.name:22} {t.label:26} province={t.is_province} human={t.is_human}",
            file=out,
        )


def parse_args(args: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=f"Show information about SIN types (version {VERSION})"
    )
    parser.add_argument(
        "--all", action="store_true", help="list all types, with their properties"
    )
    parser.add_argument("--debug", action="store_true", help="debug mode")
    return parser.parse_args(args)


def main(args: List[str] = None):
    if args is None:
        args = sys.argv[1:]
    args = parse_args(args)
    setup_logging(args.debug)

    if args.all:
        print_types(sys.stdout)
    else:
        print_digits(sys.stdout)


if __name__ == "__main__":
    main()
