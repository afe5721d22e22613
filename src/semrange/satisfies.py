"""Check a candidate version against a ``||`` list of floors.

Each list entry acts as a minimum bound only: operators on entries are parsed
but not applied, so ``<1.0.0`` is treated like ``1.0.0``. The candidate
satisfies the list when it is at least as high as any one entry.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .models import ExactVersion
from .parser import parse_version, parse_versions

logger = logging.getLogger(__name__)


def floors_met(version: ExactVersion, floors: Iterable[ExactVersion]) -> list[ExactVersion]:
    """Return the floors ``version`` is at or above, keeping their order."""
    return [floor for floor in floors if version >= floor]


def matching_ranges(candidate: str, ranges: str) -> list[ExactVersion]:
    """Return the entries of ``ranges`` that ``candidate`` meets, in order.

    The candidate is parsed first, so its errors win over errors in
    ``ranges``.
    """
    version = parse_version(candidate).exact
    floors = [entry.exact for entry in parse_versions(ranges)]
    matched = floors_met(version, floors)
    logger.debug("%s meets %d of %d floor(s) in %r", version, len(matched), len(floors), ranges)
    return matched


def satisfies(candidate: str, ranges: str) -> bool:
    return bool(matching_ranges(candidate, ranges))
