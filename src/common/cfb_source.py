"""Helper utilities to fetch CFB schedules, teams, stats and polls from CFBD."""

from __future__ import annotations

import sys
from typing import Any, Dict, List, Optional
from urllib.parse import urlencode

import requests

CFBD_BASE_URL = "https://api.collegefootballdata.com"
REQUEST_TIMEOUT = 30


class CFBDError(RuntimeError):
    """Non-2xx response from the CFBD API."""

    def __init__(self, status: int, body: str = "") -> None:
        self.status = status
        self.body = body
        super().__init__(f"CFBD {status}: {body or 'request failed'}")


def _log_api_error(message: str) -> None:
    """Emit API errors in red on stderr."""
    red = "\033[91m"
    reset = "\033[0m"
    print(f"{red}{message}{reset}", file=sys.stderr)


def _games_params(season: int, week: Optional[int], season_type: str) -> Dict[str, Any]:
    params: Dict[str, Any] = {
        "year": season,
        "classification": "fbs",
        "seasonType": season_type,
    }
    if week:
        params["week"] = week
    return params


def build_games_url(season: int, week: Optional[int] = None, season_type: str = "regular") -> str:
    """Return the CFBD games URL (FBS classification, optional week)."""
    return f"{CFBD_BASE_URL}/games?{urlencode(_games_params(season, week, season_type))}"


def _get_list(path: str, params: Dict[str, Any], api_key: str) -> Optional[List[dict]]:
    url = f"{CFBD_BASE_URL}{path}"
    headers = {"Authorization": f"Bearer {api_key}"}
    resp = requests.get(url, headers=headers, params=params, timeout=REQUEST_TIMEOUT)
    if not resp.ok:
        err = CFBDError(resp.status_code, (resp.text or "").strip())
        _log_api_error(f"{path}: {err}")
        raise err
    data = resp.json()
    if isinstance(data, list):
        return data
    return None


def fetch_cfbd_games(
    season: int,
    week: Optional[int],
    api_key: str,
    season_type: str = "regular",
) -> Optional[List[dict]]:
    """Return the raw CFBD FBS games payload for the requested season/week."""
    return _get_list("/games", _games_params(season, week, season_type), api_key)


def fetch_cfbd_teams(season: int, api_key: str, fbs_only: bool = True) -> Optional[List[dict]]:
    """Return team metadata (logos, alternates, mascots) for the season."""
    path = "/teams/fbs" if fbs_only else "/teams"
    return _get_list(path, {"year": season}, api_key)


def fetch_cfbd_season_stats(
    season: int,
    api_key: str,
    season_type: str = "regular",
    end_week: Optional[int] = None,
) -> Optional[List[dict]]:
    """Return cumulative team stats (one row per team/stat), optionally through ``end_week``."""
    params: Dict[str, Any] = {"year": season, "seasonType": season_type}
    if end_week:
        params["endWeek"] = end_week
    return _get_list("/stats/season", params, api_key)


def fetch_cfbd_rankings(season: int, api_key: str, season_type: str = "regular") -> Optional[List[dict]]:
    """Return weekly poll snapshots for the season."""
    return _get_list("/rankings", {"year": season, "seasonType": season_type}, api_key)


__all__ = [
    "CFBD_BASE_URL",
    "CFBDError",
    "build_games_url",
    "fetch_cfbd_games",
    "fetch_cfbd_teams",
    "fetch_cfbd_season_stats",
    "fetch_cfbd_rankings",
]
