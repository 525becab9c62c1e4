"""Per-game averages from CFBD cumulative season stats.

Purpose:
    Convert ``/stats/season`` totals into per-game figures for FBS teams.
Inputs:
    Stat rows (flat ``team``/``statName``/``statValue`` rows or nested
    ``team`` + ``stats`` lists), completed-game counts per team, FBS team names.
Outputs:
    ``{team: {stat_name: per_game_average}}``.
Invariants:
    * Rows for teams outside the FBS set are dropped.
    * Divisor is ``max(1, completed games)``: a team with no completed games
      reports its raw cumulative value.
    * Non-numeric stat values are skipped one at a time; the rest of the row
      survives.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, Mapping, Optional, Tuple

from src.common.cfb_fields import STAT_NAME, STAT_TEAM, STAT_VALUE, first_number, first_value
from src.common.team_names_cfb import normalize_team_key


def _stat_entries(row: Mapping[str, Any]) -> Iterator[Tuple[str, Optional[float]]]:
    nested = row.get("stats")
    items = nested if isinstance(nested, list) else [row]
    for item in items:
        name = first_value(item, STAT_NAME)
        if not name:
            continue
        yield str(name), first_number(item, STAT_VALUE)


def average_stats(
    stat_rows: Optional[Iterable[Dict[str, Any]]],
    completed_counts: Optional[Mapping[str, int]],
    fbs_teams: Iterable[str],
) -> Dict[str, Dict[str, float]]:
    """Divide cumulative stats by completed games for each FBS team."""
    fbs_keys = {normalize_team_key(team) for team in fbs_teams}
    fbs_keys.discard("")
    games_by_key: Dict[str, int] = {}
    for team, count in (completed_counts or {}).items():
        games_by_key[normalize_team_key(team)] = int(count or 0)

    averages: Dict[str, Dict[str, float]] = {}
    for row in stat_rows or []:
        if not isinstance(row, Mapping):
            continue
        team = first_value(row, STAT_TEAM)
        team_key = normalize_team_key(team)
        if team_key not in fbs_keys:
            continue
        divisor = max(1, games_by_key.get(team_key, 0))
        team_stats = averages.setdefault(str(team), {})
        for name, value in _stat_entries(row):
            if value is None:
                continue
            team_stats[name] = value / divisor
    return averages


__all__ = ["average_stats"]
