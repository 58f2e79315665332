"""
Command-line script to validate and classify SINs
"""

import sys
import json
import logging
import argparse

from typing import List, TextIO

from canada_sin import VERSION, SIN, SinParseError
from canada_sin.helper.json import CustomJSONEncoder
from canada_sin.app import setup_logging


logger = logging.getLogger(__name__)


def render(sin: SIN, fmt: str = "grouped", types: bool = False) -> str:
    out = sin.formatted() if fmt == "grouped" else sin.compact()
    if types:
        out += "  [" + ", ".join(t.label for t in sin.types()) + "]"
    return out


def process(
    sins: List[str],
    fmt: str = "grouped",
    types: bool = False,
    json_out: bool = False,
    out: TextIO = None,
) -> int:
    """
    Process the request: parse each SIN and print the result.
    Return the number of invalid SINs found
    """
    if out is None:
        out = sys.stdout
    result = []
    errors = 0
    for text in sins:
        try:
            sin = SIN.parse(text)
        except SinParseError as e:
            logger.debug("rejected %r: %s", text, e)
            errors += 1
            if json_out:
                result.append({"input": text, "error": e.kind.name})
            else:
                print(f"{text}: {e}", file=out)
            continue
        if json_out:
            result.append({"input": text, "sin": sin})
        else:
            print(render(sin, fmt, types), file=out)

    if json_out:
        json.dump(result, out, cls=CustomJSONEncoder, indent=2)
        print(file=out)
    return errors


def parse_args(args: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=f"Validate Canadian Social Insurance Numbers (version {VERSION})"
    )

    g0 = parser.add_argument_group("Input")
    g0.add_argument("sins", metavar="SIN", nargs="+", help="SINs to check")

    g1 = parser.add_argument_group("Output")
    g1.add_argument(
        "--format",
        dest="fmt",
        choices=("compact", "grouped"),
        default="grouped",
        help="output format for valid SINs (default: %(default)s)",
    )
    g1.add_argument(
        "--types", action="store_true", help="show the possible types of each SIN"
    )
    g1.add_argument(
        "--json", dest="json_out", action="store_true", help="produce JSON output"
    )

    g2 = parser.add_argument_group("Other")
    g2.add_argument("--debug", action="store_true", help="debug mode")

    return parser.parse_args(args)


def main(args: List[str] = None) -> int:
    if args is None:
        args = sys.argv[1:]
    args = vars(parse_args(args))
    setup_logging(args.pop("debug"))
    errors = process(args.pop("sins"), **args)
    return 1 if errors else 0


if __name__ == "__main__":
    sys.exit(main())
