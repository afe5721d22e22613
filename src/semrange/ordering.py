"""Three-way comparators behind version equality and ordering.

Each model's ``__eq__`` and rich comparisons delegate here, so equality is
always "the comparator returned ``EQUAL``" and the two relations cannot
drift apart.
"""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models.exact_version import ExactVersion
    from .models.range_version import RangeVersion
    from .models.version import Version


class Ordering(IntEnum):
    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, left: object, right: object) -> Ordering:
        if left < right:  # type: ignore[operator]
            return cls.LESS
        if left > right:  # type: ignore[operator]
            return cls.GREATER
        return cls.EQUAL


def _field_key(value: int | None) -> tuple[int, int]:
    # A missing field sorts before any present value, including 0.
    if value is None:
        return (0, 0)
    return (1, value)


def compare_exact(left: ExactVersion, right: ExactVersion) -> Ordering:
    """Compare by major, then minor, then patch. The operator is ignored."""
    if left.major != right.major:
        return Ordering.of(left.major, right.major)
    if left.minor != right.minor:
        return Ordering.of(_field_key(left.minor), _field_key(right.minor))
    return Ordering.of(_field_key(left.patch), _field_key(right.patch))


def compare_range(left: RangeVersion, right: RangeVersion) -> Ordering:
    """``min`` decides; ``max`` only breaks a tie on ``min``."""
    result = compare_exact(left.min, right.min)
    if result is not Ordering.EQUAL:
        return result
    return compare_exact(left.max, right.max)


def compare_versions(left: Version, right: Version) -> Ordering:
    """Order by variant tag first (none, exact, range), then by payload."""
    if left.kind is not right.kind:
        return Ordering.of(left.kind.rank, right.kind.rank)
    if left.is_exact():
        return compare_exact(left.exact, right.exact)
    if left.is_range():
        return compare_range(left.range, right.range)
    return Ordering.EQUAL
