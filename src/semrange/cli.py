"""Check whether a version satisfies a ``||`` list of version floors.

Usage:
  semrange VERSION RANGES [--warn-only] [--debug]

Prints a JSON report. Exits 0 when satisfied, 10 when not (0 with
``--warn-only`` or ``SEMRANGE_WARN_ONLY``), and 1 on a parse error.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys

from .errors import ParseError
from .report import build_report, validate_report

WARN_ONLY_ENV_VAR = "SEMRANGE_WARN_ONLY"
EXIT_UNSATISFIED = 10

_TRUTHY = {"1", "true", "yes", "y"}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="semrange", description=__doc__.splitlines()[0])
    parser.add_argument("version", help="Candidate version, e.g. 1.2.3")
    parser.add_argument("ranges", help="Version floors separated by '||'")
    parser.add_argument(
        "--warn-only",
        action="store_true",
        help="Exit 0 even when the version does not satisfy the ranges",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def _warn_only_from_env() -> bool:
    return os.getenv(WARN_ONLY_ENV_VAR, "").strip().lower() in _TRUTHY


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        report = build_report(args.version, args.ranges)
    except ParseError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    validate_report(report)
    print(json.dumps(report, indent=2))

    if not report["satisfied"] and not (args.warn_only or _warn_only_from_env()):
        return EXIT_UNSATISFIED
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
