"""Comparison operator attached to a version literal."""

from __future__ import annotations

from enum import Enum
from functools import total_ordering

# Two-character symbols come first so ">=" is never read as ">".
_PREFIX_ORDER = ("<=", ">=", "=", "<", ">", "^", "~", "*")


@total_ordering
class Operator(Enum):
    """Closed set of operators a specifier may start with."""

    EXACT = "="
    GREATER = ">"
    GREATER_EQ = ">="
    LESS = "<"
    LESS_EQ = "<="
    TILDE = "~"
    CARET = "^"
    WILDCARD = "*"

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def rank(self) -> int:
        return _RANKS[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Operator):
            return NotImplemented
        return self.rank < other.rank

    @classmethod
    def from_symbol(cls, symbol: str) -> Operator:
        try:
            return cls(symbol)
        except ValueError:
            raise ValueError(f"Unknown operator symbol: {symbol!r}") from None

    @classmethod
    def match_prefix(cls, text: str) -> tuple[Operator | None, int]:
        """Return the operator ``text`` starts with and how many chars it spans.

        ``(None, 0)`` is returned when the text has no leading operator.
        """
        for symbol in _PREFIX_ORDER:
            if text.startswith(symbol):
                return cls(symbol), len(symbol)
        return None, 0


_RANKS = {operator: index for index, operator in enumerate(Operator)}
