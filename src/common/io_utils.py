"""Shared config and output-directory helpers.

Purpose:
    Centralise .env loading and the /out layout so view scripts stay focused
    on data logic.
Inputs:
    Requested environment variable keys.
Outputs:
    Environment key/value mappings, /out directory paths.
Example:
    >>> cfbd_api_key()
    'abc123'
    >>> views_out_dir(2024)
    PosixPath('.../out/cfb/2024_views')
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Sequence

from dotenv import load_dotenv

RepositoryPath = Path(__file__).resolve().parents[2]
OUT = RepositoryPath / "out"

_ENV_LOADED = False


def load_env_once(override: bool = False) -> None:
    """Load .env into os.environ once (idempotent)."""
    global _ENV_LOADED
    if _ENV_LOADED:
        return
    env_path = RepositoryPath / ".env"
    if env_path.exists():
        load_dotenv(dotenv_path=env_path, override=override)
    _ENV_LOADED = True


def getenv(key: str, default: str | None = None) -> str | None:
    """Project-safe getenv that ensures .env is loaded once."""
    load_env_once(override=False)
    return os.environ.get(key, default)


def read_env(keys: Sequence[str]) -> dict:
    """Return environment variables (after loading .env once)."""
    load_env_once(override=False)
    return {key: os.environ.get(key) for key in keys}


def cfbd_api_key() -> Optional[str]:
    """CFBD bearer token from ``CFBD_API_KEY`` (``API_KEY`` accepted as fallback)."""
    env = read_env(["CFBD_API_KEY", "API_KEY"])
    value = env.get("CFBD_API_KEY") or env.get("API_KEY")
    return value.strip() if value and value.strip() else None


def debug_enabled() -> bool:
    return getenv("CFB_VIEWS_DEBUG", "0") == "1"


def ensure_out_dir() -> Path:
    """Ensure the repository /out directory exists and return its Path."""
    OUT.mkdir(parents=True, exist_ok=True)
    return OUT


def views_out_dir(season: int, week: Optional[int] = None) -> Path:
    """Return the per-season (or per-week) view output directory, creating it."""
    label = f"{season}_week{week}_views" if week else f"{season}_views"
    directory = ensure_out_dir() / "cfb" / label
    directory.mkdir(parents=True, exist_ok=True)
    return directory


__all__ = [
    "load_env_once",
    "getenv",
    "read_env",
    "cfbd_api_key",
    "debug_enabled",
    "ensure_out_dir",
    "views_out_dir",
]
