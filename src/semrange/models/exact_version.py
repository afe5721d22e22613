"""Exact version literal model."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering

from packaging.version import Version as PackagingVersion

from ..ordering import Ordering, compare_exact
from .operator import Operator

MAX_COMPONENT = 0xFFFF


def _check_component(name: str, value: int | None) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if not 0 <= value <= MAX_COMPONENT:
        raise ValueError(f"{name} must be between 0 and {MAX_COMPONENT}, got {value}")


@total_ordering
@dataclass(frozen=True, eq=False)
class ExactVersion:
    """A ``major[.minor[.patch]]`` literal with an optional leading operator.

    Equality, hashing and ordering only look at the numeric fields, so
    ``>1.0.0`` and ``1.0.0`` compare equal.
    """

    major: int = 0
    minor: int | None = None
    patch: int | None = None
    operator: Operator = Operator.EXACT

    def __post_init__(self) -> None:
        _check_component("major", self.major)
        _check_component("minor", self.minor)
        _check_component("patch", self.patch)
        if self.patch is not None and self.minor is None:
            raise ValueError("patch cannot be set without minor")
        if not isinstance(self.operator, Operator):
            raise ValueError(f"Invalid operator: {self.operator!r}")

    def compare(self, other: ExactVersion) -> Ordering:
        return compare_exact(self, other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExactVersion):
            return NotImplemented
        return self.compare(other) is Ordering.EQUAL

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ExactVersion):
            return NotImplemented
        return self.compare(other) is Ordering.LESS

    def __hash__(self) -> int:
        return hash((self.major, self.minor, self.patch))

    def __str__(self) -> str:
        prefix = "" if self.operator is Operator.EXACT else self.operator.symbol
        parts = [str(self.major)]
        if self.minor is not None:
            parts.append(str(self.minor))
        if self.patch is not None:
            parts.append(str(self.patch))
        return prefix + ".".join(parts)

    def to_dict(self) -> dict[str, object]:
        return {
            "operator": self.operator.symbol,
            "major": self.major,
            "minor": self.minor,
            "patch": self.patch,
        }

    def to_packaging(self) -> PackagingVersion:
        """Return the equivalent ``packaging`` version, missing fields as 0."""
        return PackagingVersion(f"{self.major}.{self.minor or 0}.{self.patch or 0}")

    def with_operator(self, operator: Operator) -> ExactVersion:
        return ExactVersion(self.major, self.minor, self.patch, operator)

    @classmethod
    def from_tuple(cls, values: tuple) -> ExactVersion:
        """Build from ``(major,)``, ``(major, minor)``, ``(major, minor, patch)``
        or ``(operator, major, minor, patch)``.
        """
        if len(values) == 4:
            operator, *numbers = values
            return exact_version(*numbers, operator=operator)
        if 1 <= len(values) <= 3:
            return exact_version(*values)
        raise ValueError(f"Cannot build a version from {values!r}")


def exact_version(
    major: int,
    minor: int | None = None,
    patch: int | None = None,
    operator: Operator | str = Operator.EXACT,
) -> ExactVersion:
    """Convenience constructor; ``operator`` may be given as its symbol."""
    if isinstance(operator, str):
        operator = Operator.from_symbol(operator)
    return ExactVersion(major=major, minor=minor, patch=patch, operator=operator)
