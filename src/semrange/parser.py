"""Parse version specifiers and ``||``-separated specifier lists.

Grammar of one specifier::

    specifier := operator? major ('.' minor)? ('.' patch)?
    operator  := "<=" | ">=" | "=" | "<" | ">" | "^" | "~" | "*"

Each numeric field is one or more ASCII digits and must fit in 16 bits.
"""

from __future__ import annotations

import logging
import re
from enum import Enum

from .errors import EmptyInputError, IncorrectSeparatorError, NotANumberError
from .models import MAX_COMPONENT, ExactVersion, Operator, Version

logger = logging.getLogger(__name__)

_SEPARATOR = re.compile(r"\s*\|\|\s*")
_SPECIFIER_PREFIX = re.compile(r"(?:<=|>=|=|<|>|\^|~|\*)?[0-9]+(?:\.[0-9]+){0,2}")


class _Field(Enum):
    """Which numeric field the next digit run fills."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    DONE = "done"


_NEXT_FIELD = {
    _Field.MAJOR: _Field.MINOR,
    _Field.MINOR: _Field.PATCH,
    _Field.PATCH: _Field.DONE,
}


def _parse_component(run: str) -> int:
    # str.isdigit alone accepts non-ASCII digits, which int() would also take.
    if not (run.isascii() and run.isdigit()):
        raise NotANumberError(run)
    # Bound the length first; int() refuses very long digit strings outright.
    if len(run.lstrip("0")) > len(str(MAX_COMPONENT)):
        raise NotANumberError(run)
    value = int(run)
    if value > MAX_COMPONENT:
        raise NotANumberError(run)
    return value


def parse_version(text: str) -> Version:
    """Parse a single specifier such as ``">=1.2.3"`` into an exact version.

    Raises:
        EmptyInputError: ``text`` is empty or holds only an operator.
        NotANumberError: a field is not a 16-bit unsigned integer.
    """
    if not text:
        raise EmptyInputError()

    operator, consumed = Operator.match_prefix(text)
    remaining: str | None = text[consumed:]
    if not remaining:
        raise EmptyInputError()

    fields: dict[str, int] = {}
    state = _Field.MAJOR
    while remaining is not None:
        if state is _Field.PATCH:
            # Everything after the patch separator is one run, so "1.2.3.4"
            # fails on "3.4".
            run, remaining = remaining, None
        else:
            run, separator, rest = remaining.partition(".")
            remaining = rest if separator else None
        fields[state.value] = _parse_component(run)
        state = _NEXT_FIELD[state]

    exact = ExactVersion(operator=operator or Operator.EXACT, **fields)
    return Version.of_exact(exact)


def _check_segment(segment: str) -> None:
    if not segment or "|" in segment:
        raise IncorrectSeparatorError()
    match = _SPECIFIER_PREFIX.match(segment)
    if match is None or match.end() == len(segment):
        return
    # A complete specifier followed by anything but another field means a
    # separator was expected here.
    if segment[match.end()] != ".":
        raise IncorrectSeparatorError()


def parse_versions(text: str) -> list[Version]:
    """Parse ``"1.0.0 || >=2.0"`` style lists, in input order.

    Whitespace around each ``||`` and at either end of the list is ignored.
    At least one specifier is required.

    Raises:
        IncorrectSeparatorError: the list is empty, has an empty entry, or
            an entry runs into text that is not a ``||`` separator.
        EmptyInputError, NotANumberError: an entry failed to parse.
    """
    text = text.strip()
    if not text:
        raise IncorrectSeparatorError()

    versions: list[Version] = []
    for segment in _SEPARATOR.split(text):
        _check_segment(segment)
        versions.append(parse_version(segment))

    logger.debug("Parsed %d specifier(s) from %r", len(versions), text)
    return versions
