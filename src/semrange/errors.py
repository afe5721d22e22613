"""Errors raised while parsing version specifiers."""

from __future__ import annotations


class ParseError(ValueError):
    """Base class for every specifier parse failure.

    Errors compare equal when they share a type and payload so callers can
    assert on them directly.
    """

    message = "invalid version specifier"

    def __str__(self) -> str:
        return self.message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseError):
            return NotImplemented
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(a) for a in self.args)})"


class EmptyInputError(ParseError):
    """Raised when the input holds no specifier at all."""

    message = "Empty string"


class NotANumberError(ParseError):
    """Raised when a digit run is not an unsigned 16-bit integer."""

    def __init__(self, text: str) -> None:
        super().__init__(text)
        self.text = text

    def __str__(self) -> str:
        return f"{self.text} is not a number"


class IncorrectSeparatorError(ParseError):
    """Raised when a range list is missing or misuses the ``||`` separator."""

    message = "incorrect separator for ranges"
