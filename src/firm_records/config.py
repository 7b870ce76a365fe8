"""Configuration helpers and Settings container.

This module provides a small `Settings` dataclass and `get_settings` which
reads `FIRM_RECORDS_*` environment variables (a `.env` file at the project
root is loaded first).
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import logging
import os

from dotenv import load_dotenv

# Explicitly load .env from project root
PROJECT_ROOT = Path(__file__).resolve().parents[2]
load_dotenv(PROJECT_ROOT / ".env")

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    """Container for firm record configuration read from the environment.

    Attributes:
        coerce_all_nulls: Coerce None to "" for every builder setter,
            including region code and business name.
        log_level: Logging level passed to `configure_logging`.
        log_path: Optional log file path.
    """
    coerce_all_nulls: bool
    log_level: int
    log_path: Path | None


def _parse_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name, "").strip().lower()
    if not raw:
        return default
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    raise RuntimeError(f"{name} must be a boolean (true/false), got {raw!r}.")


def _parse_level(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    if not isinstance(level, int):
        raise RuntimeError(f"{name} must be a logging level name or number, got {raw!r}.")
    return level


def get_settings() -> Settings:
    """Read environment variables and return a frozen `Settings` object.

    Raises:
        RuntimeError: if a boolean or log level variable cannot be parsed.
    """
    coerce_all_nulls = _parse_bool("FIRM_RECORDS_COERCE_ALL_NULLS", False)
    log_level = _parse_level("FIRM_RECORDS_LOG_LEVEL", logging.INFO)
    log_path_raw = os.getenv("FIRM_RECORDS_LOG_PATH", "").strip()

    return Settings(
        coerce_all_nulls=coerce_all_nulls,
        log_level=log_level,
        log_path=Path(log_path_raw) if log_path_raw else None,
    )
