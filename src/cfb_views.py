"""Assemble CFB view contexts (teams, dashboard) from live CFBD payloads.

Purpose:
    Fan out the CFBD fetches for a request, fan in, and run the pure
    normalization helpers to produce the structures a renderer binds to.
Inputs:
    Season (defaults to the current year), optional week, CFBD API key.
Outputs:
    ``out/cfb/{season}[_week{week}]_views/{view}.json`` and, for the
    dashboard, ``standings.csv``.
Invariants:
    * Nothing is cached between runs; every request rebuilds its directory.
    * Any failed fetch aborts the whole assembly (no partial views).
Example:
    python -m src.cfb_views --view dashboard --season 2024 --polls all
"""

from __future__ import annotations

import argparse
import sys
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

import pandas as pd
import requests

from src.common.cfb_fields import safe_float
from src.common.cfb_source import (
    CFBDError,
    fetch_cfbd_games,
    fetch_cfbd_rankings,
    fetch_cfbd_season_stats,
    fetch_cfbd_teams,
)
from src.common.io_atomic import write_atomic_csv, write_atomic_json
from src.common.io_utils import cfbd_api_key, debug_enabled, views_out_dir
from src.common.polls_cfb import POLL_MODES, extract_polls
from src.common.records_cfb import (
    STANDINGS_COLUMNS,
    aggregate_records,
    build_standings_frame,
    completed_game_counts,
    compute_ratings,
    extract_fbs_teams,
)
from src.common.stats_cfb import average_stats
from src.common.team_directory_cfb import build_logo_map, build_team_directory, schedule_team_names

VIEWS = ("teams", "dashboard")


@dataclass
class ViewPayloads:
    games: List[dict] = field(default_factory=list)
    teams: List[dict] = field(default_factory=list)
    stats: List[dict] = field(default_factory=list)
    rankings: List[dict] = field(default_factory=list)


def fetch_view_payloads(season: int, week: Optional[int], api_key: str) -> ViewPayloads:
    """Fetch games, teams, season stats and rankings in parallel.

    Games always cover the whole season; with ``week`` the stats stop at that
    week and ``build_dashboard_view`` trims the games to the same window.
    Results are collected in submission order (games, teams, stats,
    rankings), so when several fetches fail the earliest-submitted error is
    the one raised. Nothing is retried.
    """
    with ThreadPoolExecutor(max_workers=4) as pool:
        games = pool.submit(fetch_cfbd_games, season, None, api_key)
        teams = pool.submit(fetch_cfbd_teams, season, api_key)
        stats = pool.submit(fetch_cfbd_season_stats, season, api_key, end_week=week)
        rankings = pool.submit(fetch_cfbd_rankings, season, api_key)
        return ViewPayloads(
            games=games.result() or [],
            teams=teams.result() or [],
            stats=stats.result() or [],
            rankings=rankings.result() or [],
        )


def games_through_week(games: List[dict], week: Optional[int]) -> List[dict]:
    """Games played in or before ``week`` (all games when week is None; no week sorts as 0)."""
    if not week:
        return list(games)
    kept = []
    for game in games:
        game_week = safe_float(game.get("week")) if isinstance(game, dict) else None
        if (game_week or 0) <= week:
            kept.append(game)
    return kept


def build_teams_view(games: List[dict], season: int, week: Optional[int] = None) -> Dict[str, Any]:
    """Context for the teams page: the schedule plus its FBS participants."""
    return {
        "season": season,
        "week": week,
        "games": games,
        "fbs_teams": extract_fbs_teams(games),
    }


def build_dashboard_view(
    payloads: ViewPayloads,
    season: int,
    week: Optional[int] = None,
    poll_mode: str = "latest",
) -> Dict[str, Any]:
    """Context for the dashboard: logos, records, ratings, averages, polls.

    With ``week`` set, records and per-game averages cover weeks 1..week,
    matching stats fetched with ``endWeek``.
    """
    games = games_through_week(payloads.games, week)
    fbs_teams = extract_fbs_teams(games)
    records = aggregate_records(games)
    ratings = compute_ratings(records, fbs_teams)
    directory = build_team_directory(payloads.teams)
    logos = build_logo_map(schedule_team_names(games), directory)
    averages = average_stats(payloads.stats, completed_game_counts(records), fbs_teams)
    polls = extract_polls(payloads.rankings, poll_mode)

    fbs_set = set(fbs_teams)
    standings = build_standings_frame(
        records,
        {team: rating for team, rating in ratings.items() if team in fbs_set},
    )
    return {
        "season": season,
        "week": week,
        "fbs_teams": fbs_teams,
        "logos": logos,
        "records": records,
        "ratings": ratings,
        "stats": averages,
        "poll_mode": poll_mode,
        "polls": polls,
        "standings": standings.to_dict(orient="records"),
    }


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Build CFB view contexts from CFBD.")
    parser.add_argument("--view", choices=VIEWS, default="dashboard")
    parser.add_argument("--season", type=int, default=datetime.now().year)
    parser.add_argument(
        "--week",
        type=int,
        help="Teams view: games of this week only. Dashboard: records and stats through this week.",
    )
    parser.add_argument("--polls", choices=POLL_MODES, default="latest", help="Poll buckets to keep.")
    args = parser.parse_args(argv)

    api_key = cfbd_api_key()
    if not api_key:
        print("FAIL: CFBD_API_KEY not set (checked env and .env).", file=sys.stderr)
        return 1

    print(f"CFB views: view={args.view} season={args.season} week={args.week or 'all'}")
    try:
        if args.view == "teams":
            games = fetch_cfbd_games(args.season, args.week, api_key) or []
            context = build_teams_view(games, args.season, args.week)
        else:
            payloads = fetch_view_payloads(args.season, args.week, api_key)
            context = build_dashboard_view(payloads, args.season, args.week, args.polls)
    except (CFBDError, requests.RequestException) as exc:
        print(f"FAIL: error fetching CFBD data for {args.view}: {exc}", file=sys.stderr)
        return 1

    out_dir = views_out_dir(args.season, args.week)
    json_path = out_dir / f"{args.view}.json"
    write_atomic_json(json_path, context)
    print(f"PASS: wrote {json_path} fbs_teams={len(context['fbs_teams'])}")

    if args.view == "dashboard":
        csv_path = out_dir / "standings.csv"
        write_atomic_csv(csv_path, pd.DataFrame(context["standings"], columns=STANDINGS_COLUMNS))
        print(f"PASS: wrote {csv_path} rows={len(context['standings'])}")
        if not context["polls"]:
            print("WARNING: no AP/Coaches poll data for this season.")
        if debug_enabled():
            missing = sorted(name for name, logo in context["logos"].items() if logo is None)
            print(f"DEBUG: logos unresolved={len(missing)} {missing[:10]}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
