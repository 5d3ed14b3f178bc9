"""Command-line interface for the case converter.

WHY: Quick one-off conversions ("what is this in toggle case?") and shell
pipelines should not need a Python session. The CLI wraps to_case() behind
a single command.

HOW: Uses argparse to accept the text (or "-" for stdin), the target case
name and an optional seed for the random pattern. The converted text goes
to stdout; errors go to stderr.

RULES:
- Usage:
    python -m case_extras "My variable NAME" --case alternating
    echo "My variable NAME" | python -m case_extras - --case toggle
    python -m case_extras --list
- --case defaults to config.DEFAULT_CASE
- --seed only affects the random case
- Exit codes: 0 = success, 1 = error (unknown case, empty input)
- Stdin input is converted line by line so multi-line input keeps its lines
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import List, Optional

from case_extras import config
from case_extras.case import CASES, get_case
from case_extras.converter import to_case

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    Kept separate from main() so tests can inspect the parser.
    """
    parser = argparse.ArgumentParser(
        prog="case_extras",
        description="Convert text to toggle, alternating or random case.",
    )

    parser.add_argument(
        "text",
        nargs="?",
        default="-",
        help="Text to convert, or '-' to read from stdin (default).",
    )

    parser.add_argument(
        "--case",
        default=config.DEFAULT_CASE,
        help="Target case. Available: {} (default: %(default)s).".format(
            ", ".join(CASES.keys())
        ),
    )

    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random case, for reproducible output.",
    )

    parser.add_argument(
        "--list",
        action="store_true",
        help="List available cases and exit.",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)

    if args.list:
        for name in CASES:
            print(name)
        return

    try:
        target = get_case(args.case)
    except ValueError as e:
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)

    if args.text == "-":
        lines = sys.stdin.read().splitlines()
    else:
        lines = [args.text]

    if not any(line.strip() for line in lines):
        print("Error: No text to convert", file=sys.stderr)
        sys.exit(1)

    rng = random.Random(args.seed) if args.seed is not None else None
    logger.debug("Converting %d line(s) to %s case", len(lines), args.case)
    for line in lines:
        print(to_case(line, target, rng=rng))


if __name__ == "__main__":
    main()
