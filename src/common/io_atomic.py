"""Atomic write helpers for view artifacts.

Purpose & scope:
    Write the JSON view contexts and CSV tables via tmp-replace so a renderer
    polling /out never reads a partially-written file.

Invariants:
    * Parent directories are created before writing.
    * Writes occur via ``path.tmp`` followed by ``os.replace``.
    * CSV input may be a pandas DataFrame or a sequence of row mappings.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Mapping, Sequence, Union

import pandas as pd

CsvInput = Union[pd.DataFrame, Sequence[Mapping[str, object]]]


def _tmp_path(path: Path) -> Path:
    """Return a sibling temporary path for atomic writes."""
    return path.with_suffix(path.suffix + ".tmp")


def write_atomic_csv(path: Union[str, Path], data: CsvInput) -> None:
    """Write a DataFrame or sequence of dicts to CSV atomically."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    tmp = _tmp_path(target)
    if isinstance(data, pd.DataFrame):
        data.to_csv(tmp, index=False)
    else:
        pd.DataFrame(list(data)).to_csv(tmp, index=False)
    os.replace(tmp, target)


def write_atomic_json(path: Union[str, Path], payload: Mapping[str, object]) -> None:
    """Serialize mapping to JSON (utf-8) atomically."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    tmp = _tmp_path(target)
    with tmp.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, ensure_ascii=False, indent=2, default=str)
    os.replace(tmp, target)


__all__ = ["write_atomic_csv", "write_atomic_json"]
