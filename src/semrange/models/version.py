"""Tagged union over the version variants."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering

from ..ordering import Ordering, compare_versions
from .exact_version import ExactVersion
from .range_version import RangeVersion


class VersionKind(Enum):
    NONE = "none"
    EXACT = "exact"
    RANGE = "range"

    @property
    def rank(self) -> int:
        return _KIND_RANKS[self]


_KIND_RANKS = {kind: index for index, kind in enumerate(VersionKind)}


@total_ordering
@dataclass(frozen=True, eq=False)
class Version:
    """Either nothing, one exact version, or a min/max range.

    ``Version()`` is the empty variant. Use :meth:`of_exact` and
    :meth:`of_range` for the other two; the payload always matches ``kind``.
    """

    kind: VersionKind = VersionKind.NONE
    value: ExactVersion | RangeVersion | None = None

    def __post_init__(self) -> None:
        expected = {
            VersionKind.NONE: type(None),
            VersionKind.EXACT: ExactVersion,
            VersionKind.RANGE: RangeVersion,
        }[self.kind]
        if not isinstance(self.value, expected):
            raise ValueError(
                f"{self.kind.name} version cannot hold {type(self.value).__name__}"
            )

    @classmethod
    def none(cls) -> Version:
        return cls()

    @classmethod
    def of_exact(cls, value: ExactVersion) -> Version:
        return cls(VersionKind.EXACT, value)

    @classmethod
    def of_range(cls, value: RangeVersion) -> Version:
        return cls(VersionKind.RANGE, value)

    def is_none(self) -> bool:
        return self.kind is VersionKind.NONE

    def is_exact(self) -> bool:
        return self.kind is VersionKind.EXACT

    def is_range(self) -> bool:
        return self.kind is VersionKind.RANGE

    @property
    def exact(self) -> ExactVersion:
        if not isinstance(self.value, ExactVersion):
            raise TypeError(f"{self.kind.name} version has no exact value")
        return self.value

    @property
    def range(self) -> RangeVersion:
        if not isinstance(self.value, RangeVersion):
            raise TypeError(f"{self.kind.name} version has no range value")
        return self.value

    def compare(self, other: Version) -> Ordering:
        return compare_versions(self, other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) is Ordering.EQUAL

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) is Ordering.LESS

    def __hash__(self) -> int:
        return hash((self.kind, self.value))

    def __str__(self) -> str:
        return "" if self.value is None else str(self.value)

    def to_dict(self) -> dict[str, object]:
        data: dict[str, object] = {"kind": self.kind.value}
        if self.value is not None:
            data["value"] = self.value.to_dict()
        return data
