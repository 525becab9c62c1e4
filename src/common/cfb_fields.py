"""Field extractors for CFBD payloads whose key naming varies by API version.

Purpose:
    CFBD v1 payloads use snake_case (``home_team``, ``home_points``) while v2
    uses camelCase (``homeTeam``, ``homePoints``). Each logical field is an
    ordered tuple of extractor strategies; ``first_value`` tries them in order
    and returns the first value that is present.
Invariants:
    * Extractors are pure: raw record -> value or ``None``.
    * Order inside each tuple is the priority order (camelCase first).
"""

from __future__ import annotations

import math
from typing import Any, Callable, Mapping, Optional, Sequence

Extractor = Callable[[Mapping[str, Any]], Any]


def key(name: str) -> Extractor:
    """Extractor reading a single top-level key."""

    def _extract(record: Mapping[str, Any]) -> Any:
        return record.get(name)

    _extract.__name__ = f"key_{name}"
    return _extract


def first_value(record: Any, extractors: Sequence[Extractor]) -> Any:
    """Return the first non-None value produced by ``extractors``."""
    if not isinstance(record, Mapping):
        return None
    for extractor in extractors:
        value = extractor(record)
        if value is not None:
            return value
    return None


def safe_float(value: Any) -> Optional[float]:
    """Coerce to a finite float; None for blanks, text, NaN and infinities."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip().replace(",", "")
        if not value:
            return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(result):
        return None
    return result


def first_number(record: Any, extractors: Sequence[Extractor]) -> Optional[float]:
    """First present field, coerced with ``safe_float``.

    A present-but-unparseable value ends the search (it does not fall through
    to the next convention).
    """
    return safe_float(first_value(record, extractors))


# Game fields
HOME_TEAM: Sequence[Extractor] = (key("homeTeam"), key("home_team"))
AWAY_TEAM: Sequence[Extractor] = (key("awayTeam"), key("away_team"))
HOME_POINTS: Sequence[Extractor] = (key("homePoints"), key("home_points"))
AWAY_POINTS: Sequence[Extractor] = (key("awayPoints"), key("away_points"))
HOME_CLASSIFICATION: Sequence[Extractor] = (key("homeClassification"), key("home_classification"))
AWAY_CLASSIFICATION: Sequence[Extractor] = (key("awayClassification"), key("away_classification"))

# Team metadata fields
SCHOOL: Sequence[Extractor] = (key("school"), key("team"))
ABBREVIATION: Sequence[Extractor] = (key("abbreviation"), key("abbr"))


def _legacy_alt_names(record: Mapping[str, Any]) -> Any:
    names = [record.get(f"alt_name{idx}") for idx in (1, 2, 3)]
    names = [name for name in names if name]
    return names or None


ALTERNATE_NAMES: Sequence[Extractor] = (
    key("alternateNames"),
    key("alternate_names"),
    _legacy_alt_names,
)

# Season stat fields
STAT_TEAM: Sequence[Extractor] = (key("team"), key("school"))
STAT_NAME: Sequence[Extractor] = (key("statName"), key("stat_name"), key("category"))
STAT_VALUE: Sequence[Extractor] = (key("statValue"), key("stat_value"), key("stat"))

# Ranking fields
POLL_NAME: Sequence[Extractor] = (key("poll"), key("name"))
RANK_TEAM: Sequence[Extractor] = (key("school"), key("team"))
FIRST_PLACE_VOTES: Sequence[Extractor] = (key("firstPlaceVotes"), key("first_place_votes"))


__all__ = [
    "Extractor",
    "key",
    "first_value",
    "first_number",
    "safe_float",
    "HOME_TEAM",
    "AWAY_TEAM",
    "HOME_POINTS",
    "AWAY_POINTS",
    "HOME_CLASSIFICATION",
    "AWAY_CLASSIFICATION",
    "SCHOOL",
    "ABBREVIATION",
    "ALTERNATE_NAMES",
    "STAT_TEAM",
    "STAT_NAME",
    "STAT_VALUE",
    "POLL_NAME",
    "RANK_TEAM",
    "FIRST_PLACE_VOTES",
]
