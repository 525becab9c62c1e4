"""Pure ranking/record helpers shared by the standings and view builders.

Purpose:
    Hold the small numeric helpers that can be unit tested in isolation.
Inputs:
    pandas Series of ratings, integer W/L counters.
Outputs:
    Dense ranks and "W-L" record labels.
Example:
    >>> format_record(9, 3)
    '9-3'
"""

from __future__ import annotations

from typing import Optional

import pandas as pd


def dense_rank(series: pd.Series, higher_is_better: bool) -> pd.Series:
    """Dense rank a numeric series (ties share rank, next rank increments by 1)."""
    ordered = series.sort_values(ascending=not higher_is_better, kind="mergesort")
    ranks = {}
    rank = 0
    last_val: Optional[float] = None
    for index, value in ordered.items():
        if pd.isna(value):
            continue
        if last_val is None or value != last_val:
            rank += 1
            last_val = value
        ranks[index] = rank
    return pd.Series(ranks, dtype="int64")


def format_record(wins: int, losses: int, ties: int = 0) -> str:
    """Return straight-up record W-L(-T)."""
    return f"{int(wins)}-{int(losses)}" + (f"-{int(ties)}" if ties else "")


__all__ = [
    "dense_rank",
    "format_record",
]
