"""semrange: parse version specifiers, order them, and test range membership.

The public entry points are :func:`parse_version`, :func:`parse_versions`
and :func:`satisfies`; failures raise :class:`ParseError` subclasses.
"""

from __future__ import annotations

from .errors import EmptyInputError, IncorrectSeparatorError, NotANumberError, ParseError
from .models import (
    ExactVersion,
    Operator,
    RangeVersion,
    Version,
    VersionKind,
    exact_version,
    range_version,
)
from .ordering import Ordering, compare_exact, compare_range, compare_versions
from .parser import parse_version, parse_versions
from .satisfies import floors_met, matching_ranges, satisfies

__all__ = [
    # Errors
    "EmptyInputError",
    "IncorrectSeparatorError",
    "NotANumberError",
    "ParseError",
    # Models
    "ExactVersion",
    "Operator",
    "RangeVersion",
    "Version",
    "VersionKind",
    "exact_version",
    "range_version",
    # Ordering
    "Ordering",
    "compare_exact",
    "compare_range",
    "compare_versions",
    # Parsing and evaluation
    "parse_version",
    "parse_versions",
    "floors_met",
    "matching_ranges",
    "satisfies",
]
