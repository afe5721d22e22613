"""Value models for parsed version specifiers."""

from __future__ import annotations

from .exact_version import MAX_COMPONENT, ExactVersion, exact_version
from .operator import Operator
from .range_version import RangeVersion, range_version
from .version import Version, VersionKind

__all__ = [
    "MAX_COMPONENT",
    "ExactVersion",
    "Operator",
    "RangeVersion",
    "Version",
    "VersionKind",
    "exact_version",
    "range_version",
]
