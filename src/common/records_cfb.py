"""Straight-up records and win-rate ratings folded from CFBD games.

Purpose:
    Turn the ``/games`` payload into per-team W-L counters, simple win-rate
    ratings, completed-game counts (for per-game averaging) and the FBS team
    list used by the teams view.
Inputs:
    Game dictionaries in either CFBD naming convention.
Outputs:
    ``{team: {"wins", "losses"}}``, ``{team: rating}``, a standings DataFrame.
Invariants:
    * A game counts only when both scores are present and finite.
    * Home wins only on a strictly greater score; anything else (including a
      tie) is recorded as an away win.
    * Teams without a completed game are absent from the record map.
    * Rating is wins / games played, floored to 0.0 when no games were played.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional

import pandas as pd

from src.common.cfb_fields import (
    AWAY_CLASSIFICATION,
    AWAY_POINTS,
    AWAY_TEAM,
    HOME_CLASSIFICATION,
    HOME_POINTS,
    HOME_TEAM,
    first_number,
    first_value,
)
from src.common.metrics import dense_rank, format_record

Record = Dict[str, int]

STANDINGS_COLUMNS = ["Rank", "Team", "W", "L", "SU", "Rating"]


def _bump(records: Dict[str, Record], team: str, outcome: str) -> None:
    record = records.setdefault(team, {"wins": 0, "losses": 0})
    record[outcome] += 1


def aggregate_records(games: Optional[Iterable[Dict[str, Any]]]) -> Dict[str, Record]:
    """Fold completed games into per-team win/loss counters."""
    records: Dict[str, Record] = {}
    for game in games or []:
        home_score = first_number(game, HOME_POINTS)
        away_score = first_number(game, AWAY_POINTS)
        if home_score is None or away_score is None:
            continue
        home = first_value(game, HOME_TEAM)
        away = first_value(game, AWAY_TEAM)
        if not home or not away:
            continue
        if home_score > away_score:
            _bump(records, str(home), "wins")
            _bump(records, str(away), "losses")
        else:
            # Ties land here too; CFB has no ties in the covered seasons.
            _bump(records, str(away), "wins")
            _bump(records, str(home), "losses")
    return records


def completed_game_counts(records: Mapping[str, Record]) -> Dict[str, int]:
    return {team: rec["wins"] + rec["losses"] for team, rec in records.items()}


def compute_ratings(
    records: Mapping[str, Record],
    teams: Optional[Iterable[str]] = None,
) -> Dict[str, float]:
    """Win rate per team; 0.0 for teams with no completed games."""
    ratings: Dict[str, float] = {}
    for team, rec in records.items():
        played = rec["wins"] + rec["losses"]
        ratings[team] = rec["wins"] / played if played else 0.0
    for team in teams or []:
        ratings.setdefault(team, 0.0)
    return ratings


def extract_fbs_teams(games: Optional[Iterable[Dict[str, Any]]]) -> List[str]:
    """Team names tagged ``fbs`` on their side of any game, first-seen order."""
    fbs: Dict[str, None] = {}
    for game in games or []:
        for team_fields, class_fields in ((HOME_TEAM, HOME_CLASSIFICATION), (AWAY_TEAM, AWAY_CLASSIFICATION)):
            if first_value(game, class_fields) != "fbs":
                continue
            name = first_value(game, team_fields)
            if name:
                fbs.setdefault(str(name), None)
    return list(fbs)


def build_standings_frame(
    records: Mapping[str, Record],
    ratings: Mapping[str, float],
) -> pd.DataFrame:
    """Standings table ordered by rating (dense rank, ties share a rank)."""
    rows = []
    for team, rating in ratings.items():
        rec = records.get(team, {"wins": 0, "losses": 0})
        rows.append(
            {
                "Team": team,
                "W": rec["wins"],
                "L": rec["losses"],
                "SU": format_record(rec["wins"], rec["losses"]),
                "Rating": round(float(rating), 4),
            }
        )
    if not rows:
        return pd.DataFrame(columns=STANDINGS_COLUMNS)
    df = pd.DataFrame(rows)
    ranks = dense_rank(df.set_index("Team")["Rating"], higher_is_better=True)
    df["Rank"] = df["Team"].map(ranks).astype(int)
    df = df.sort_values(["Rank", "W", "Team"], ascending=[True, False, True])
    return df[STANDINGS_COLUMNS].reset_index(drop=True)


__all__ = [
    "Record",
    "STANDINGS_COLUMNS",
    "aggregate_records",
    "completed_game_counts",
    "compute_ratings",
    "extract_fbs_teams",
    "build_standings_frame",
]
