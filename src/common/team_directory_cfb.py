"""Team directory and logo resolution for CFBD schedule names.

Purpose:
    Index the CFBD ``/teams`` payload by every label a schedule might use and
    resolve raw schedule names to team metadata (primarily the logo URL).
Inputs:
    TeamMeta dictionaries (``school``, ``abbreviation``, ``alternateNames``,
    ``mascot``, ``conference``, ``logos``) and raw schedule team names.
Outputs:
    ``TeamDirectory`` indices and ``{raw_name: logo_url_or_None}`` maps.
Invariants:
    * Directories are built fresh per call; nothing is cached at module level.
    * Key collisions are last-write-wins in payload order (no error).
    * ``entries`` keeps every team in payload order, collisions included, so
      each canonical school name still reaches the logo map.
    * A resolved-but-logoless team and an unresolved name both map to an
      explicit ``None``; the map never omits a requested name.
Resolution order:
    1. school index on the normalized name
    2. alternate-name / school+mascot index on the normalized name
    3. school index on the normalized name with ``(...)`` removed
    4. abbreviation index on the normalized name
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from src.common.cfb_fields import (
    ABBREVIATION,
    ALTERNATE_NAMES,
    AWAY_TEAM,
    HOME_TEAM,
    SCHOOL,
    first_value,
)
from src.common.team_names_cfb import normalize_team_key, strip_parenthetical

TeamEntry = Dict[str, Any]


@dataclass
class TeamDirectory:
    by_school: Dict[str, TeamEntry] = field(default_factory=dict)
    by_abbreviation: Dict[str, TeamEntry] = field(default_factory=dict)
    by_alternate: Dict[str, TeamEntry] = field(default_factory=dict)
    entries: List[TeamEntry] = field(default_factory=list)


def _primary_logo(team: Dict[str, Any]) -> Optional[str]:
    logos = team.get("logos")
    if isinstance(logos, (list, tuple)) and logos:
        return logos[0] or None
    return None


def _alternate_names(team: Dict[str, Any]) -> List[str]:
    names = first_value(team, ALTERNATE_NAMES)
    if not isinstance(names, (list, tuple)):
        return []
    return [str(name) for name in names if name]


def _team_entry(team: Dict[str, Any]) -> TeamEntry:
    return {
        "school": str(first_value(team, SCHOOL)),
        "abbreviation": first_value(team, ABBREVIATION),
        "alternate_names": _alternate_names(team),
        "primary_logo": _primary_logo(team),
        "conference": team.get("conference"),
        "mascot": team.get("mascot"),
    }


def _put(index: Dict[str, TeamEntry], raw: Any, entry: TeamEntry) -> None:
    token = normalize_team_key(raw)
    if token:
        index[token] = entry


def build_team_directory(teams: Optional[Iterable[Dict[str, Any]]]) -> TeamDirectory:
    """Index TeamMeta records by school, abbreviation and alternate/mascot keys."""
    directory = TeamDirectory()
    for team in teams or []:
        if not isinstance(team, dict) or not first_value(team, SCHOOL):
            continue
        entry = _team_entry(team)
        directory.entries.append(entry)
        _put(directory.by_school, entry["school"], entry)
        if entry["abbreviation"]:
            _put(directory.by_abbreviation, entry["abbreviation"], entry)
        for alt in entry["alternate_names"]:
            _put(directory.by_alternate, alt, entry)
        if entry["mascot"]:
            _put(directory.by_alternate, f"{entry['school']}{entry['mascot']}", entry)
    return directory


_LookupStep = Tuple[str, Callable[[TeamDirectory], Dict[str, TeamEntry]], Callable[[str], str]]

_RESOLUTION_STEPS: Tuple[_LookupStep, ...] = (
    ("school", lambda d: d.by_school, normalize_team_key),
    ("alternate", lambda d: d.by_alternate, normalize_team_key),
    ("school_no_parens", lambda d: d.by_school, lambda raw: normalize_team_key(strip_parenthetical(raw))),
    ("abbreviation", lambda d: d.by_abbreviation, normalize_team_key),
)


def resolve_team(raw_name: Any, directory: TeamDirectory) -> Optional[TeamEntry]:
    """Return the directory entry for ``raw_name`` or None when no step matches."""
    for _label, index_of, keyer in _RESOLUTION_STEPS:
        token = keyer(raw_name)
        if not token:
            continue
        entry = index_of(directory).get(token)
        if entry is not None:
            return entry
    return None


def resolve_logo(raw_name: Any, directory: TeamDirectory) -> Optional[str]:
    """Primary logo for ``raw_name``; explicit None for no match or no logo."""
    entry = resolve_team(raw_name, directory)
    if entry is None:
        return None
    return entry.get("primary_logo")


def schedule_team_names(games: Optional[Iterable[Dict[str, Any]]]) -> List[str]:
    """Unique home/away team names in order of first appearance."""
    seen: Dict[str, None] = {}
    for game in games or []:
        for extractors in (HOME_TEAM, AWAY_TEAM):
            name = first_value(game, extractors)
            if name:
                seen.setdefault(str(name), None)
    return list(seen)


def build_logo_map(names: Iterable[str], directory: TeamDirectory) -> Dict[str, Optional[str]]:
    """Resolve schedule names to logos, then add canonical schools not yet present."""
    logos: Dict[str, Optional[str]] = {}
    for name in names:
        logos[name] = resolve_logo(name, directory)
    for entry in directory.entries:
        school = entry["school"]
        if school not in logos:
            logos[school] = entry.get("primary_logo")
    return logos


__all__ = [
    "TeamDirectory",
    "TeamEntry",
    "build_team_directory",
    "resolve_team",
    "resolve_logo",
    "schedule_team_names",
    "build_logo_map",
]
