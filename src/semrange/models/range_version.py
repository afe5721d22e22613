"""Explicit min/max bound pair."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering

from ..ordering import Ordering, compare_range
from .exact_version import ExactVersion


@total_ordering
@dataclass(frozen=True, eq=False)
class RangeVersion:
    """Bounds built in code; the specifier grammar never yields one."""

    min: ExactVersion
    max: ExactVersion

    def __post_init__(self) -> None:
        if not isinstance(self.min, ExactVersion) or not isinstance(self.max, ExactVersion):
            raise ValueError("Range bounds must be ExactVersion instances")

    def compare(self, other: RangeVersion) -> Ordering:
        return compare_range(self, other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RangeVersion):
            return NotImplemented
        return self.compare(other) is Ordering.EQUAL

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, RangeVersion):
            return NotImplemented
        return self.compare(other) is Ordering.LESS

    def __hash__(self) -> int:
        return hash((self.min, self.max))

    def __str__(self) -> str:
        return f"{self.min} - {self.max}"

    def to_dict(self) -> dict[str, object]:
        return {"min": self.min.to_dict(), "max": self.max.to_dict()}


def range_version(min: ExactVersion, max: ExactVersion) -> RangeVersion:
    return RangeVersion(min=min, max=max)
