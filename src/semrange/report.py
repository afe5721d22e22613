"""JSON report emitted by the command line entry point."""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator

from .parser import parse_version, parse_versions
from .satisfies import floors_met

REPORT_SCHEMA_PATH = Path(__file__).resolve().parent / "schemas" / "report.schema.json"


def build_report(candidate: str, ranges: str) -> dict[str, Any]:
    """Evaluate ``candidate`` against ``ranges`` and describe the outcome.

    Versions are rendered back to text in normalised form, so ``"1.0.0 ||2"``
    is listed as ``["1.0.0", "2"]``.
    """
    version = parse_version(candidate).exact
    floors = [entry.exact for entry in parse_versions(ranges)]
    matched = floors_met(version, floors)
    return {
        "version": str(version),
        "ranges": [str(floor) for floor in floors],
        "satisfied": bool(matched),
        "matched": [str(floor) for floor in matched],
    }


def _format_errors(errors: Iterable) -> str:
    return "\n".join(f"- {error.json_path}: {error.message}" for error in errors)


def validate_report(report: dict[str, Any], schema_path: Path = REPORT_SCHEMA_PATH) -> None:
    """Raise ``ValueError`` listing every schema violation in ``report``."""
    schema = json.loads(schema_path.read_text(encoding="utf-8"))
    validator = Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(report), key=lambda e: e.json_path)
    if errors:
        raise ValueError("\n" + _format_errors(errors))
