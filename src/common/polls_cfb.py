"""AP / Coaches poll buckets from the CFBD ``/rankings`` payload.

Purpose:
    Walk ranking snapshots in week order and pull out the two tracked polls.
Inputs:
    ``[{"week": 1, "polls": [{"poll": "AP Top 25", "ranks": [...]}, ...]}, ...]``
Outputs:
    ``[{"week": 1, "ap": [{"rank": 1, "team": "Georgia", ...}], "coaches": [...]}]``
Invariants:
    * Weeks are visited ascending (missing week sorts as 0).
    * The walk stops at the first week where neither tracked poll appears;
      later weeks are never read, even if they carry polls again.
    * Entries inside each poll are ordered by ascending rank.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from src.common.cfb_fields import FIRST_PLACE_VOTES, POLL_NAME, RANK_TEAM, first_value, safe_float

AP_POLL = "AP Top 25"
COACHES_POLL = "Coaches Poll"

POLL_MODES = ("latest", "all")

PollBucket = Dict[str, Any]


def _week_of(entry: Dict[str, Any]) -> int:
    week = safe_float(entry.get("week"))
    return int(week) if week is not None else 0


def _find_poll(entry: Dict[str, Any], label: str) -> Optional[Dict[str, Any]]:
    for poll in entry.get("polls") or []:
        if first_value(poll, POLL_NAME) == label:
            return poll
    return None


def _ranked_entries(poll: Optional[Dict[str, Any]]) -> List[Dict[str, Any]]:
    if poll is None:
        return []
    entries: List[Dict[str, Any]] = []
    for item in poll.get("ranks") or []:
        if not isinstance(item, dict):
            continue
        rank = safe_float(item.get("rank"))
        if rank is None:
            continue
        entry: Dict[str, Any] = {"rank": int(rank), "team": first_value(item, RANK_TEAM)}
        if item.get("conference") is not None:
            entry["conference"] = item["conference"]
        if item.get("points") is not None:
            entry["points"] = item["points"]
        votes = first_value(item, FIRST_PLACE_VOTES)
        if votes is not None:
            entry["first_place_votes"] = votes
        entries.append(entry)
    entries.sort(key=lambda e: e["rank"])
    return entries


def extract_polls(rankings: Optional[Iterable[Dict[str, Any]]], mode: str = "latest") -> List[PollBucket]:
    """Return poll buckets up to the first week without AP or Coaches data."""
    if mode not in POLL_MODES:
        raise ValueError(f"Unknown poll mode {mode!r}; expected one of {POLL_MODES}")
    weeks = sorted((e for e in rankings or [] if isinstance(e, dict)), key=_week_of)
    buckets: List[PollBucket] = []
    for entry in weeks:
        ap = _find_poll(entry, AP_POLL)
        coaches = _find_poll(entry, COACHES_POLL)
        if ap is None and coaches is None:
            break
        buckets.append(
            {
                "week": _week_of(entry),
                "ap": _ranked_entries(ap),
                "coaches": _ranked_entries(coaches),
            }
        )
    if mode == "latest":
        return buckets[-1:]
    return buckets


__all__ = [
    "AP_POLL",
    "COACHES_POLL",
    "POLL_MODES",
    "PollBucket",
    "extract_polls",
]
