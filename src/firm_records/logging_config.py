"""Utilities to configure logging for applications using firm_records.

The library never configures logging on import; callers invoke
`configure_logging` (or `configure_logging_from_settings`) once at startup.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from firm_records.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(log_path: Path | None = None, level: int = logging.INFO) -> None:
    """Configure root logging handlers and formatting.

    Existing root handlers are replaced, so calling this again with a new
    level or path takes effect.

    Args:
        log_path: Optional path to a file where logs will be written.
        level: Logging level (defaults to INFO).
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)


def configure_logging_from_settings(settings: Settings | None = None) -> Settings:
    """Configure logging from `Settings` and return the settings used."""
    s = settings or get_settings()
    configure_logging(s.log_path, s.log_level)
    return s
