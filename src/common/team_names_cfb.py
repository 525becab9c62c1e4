"""College Football team name keys used for cross-feed matching.

Purpose:
    Provide the single comparison basis for team labels coming from the CFBD
    schedule, team directory, season stats, and poll payloads.
Inputs:
    Raw team labels (school names, abbreviations, alternates, "Miami (FL)").
Outputs:
    Merge keys (lowercase alphanumeric).
Invariants:
    * ``normalize_team_key`` is total and idempotent.
    * Parenthesized qualifiers survive normalization as plain text; removing
      them is a separate, explicit step (``strip_parenthetical``).
Example:
    >>> normalize_team_key("Texas A&M")
    'texasaandm'
    >>> normalize_team_key(strip_parenthetical("Miami (FL)"))
    'miami'
"""

from __future__ import annotations

import re
from typing import Any

_NON_ALNUM = re.compile(r"[^a-z0-9]")
_PARENTHETICAL = re.compile(r"\s*\([^)]*\)")


def normalize_team_key(name: Any) -> str:
    """Return a simple merge key (lowercase, ``&`` -> ``and``, alphanumeric only)."""
    if name is None:
        return ""
    basis = str(name).lower()
    basis = basis.replace("&", "and")
    return _NON_ALNUM.sub("", basis)


def strip_parenthetical(name: Any) -> str:
    """Drop any ``(...)`` segment from a label: "Miami (FL)" -> "Miami"."""
    if name is None:
        return ""
    return _PARENTHETICAL.sub("", str(name)).strip()


__all__ = [
    "normalize_team_key",
    "strip_parenthetical",
]
