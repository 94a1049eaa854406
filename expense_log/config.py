"""Environment-driven settings shared by the CLI and the API."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional, Union

DATA_FILE_ENV = "EXPENSE_TRACKER_DATA_FILE"
LOG_LEVEL_ENV = "EXPENSE_TRACKER_LOG_LEVEL"
DEFAULT_DATA_FILE = "expenses.txt"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def resolve_data_file(explicit: Optional[Union[str, Path]] = None) -> Path:
    """Pick the log file: explicit argument, then environment, then ./expenses.txt."""
    if explicit:
        return Path(explicit)
    from_env = os.getenv(DATA_FILE_ENV, "").strip()
    return Path(from_env or DEFAULT_DATA_FILE)


def configure_logging(level: Optional[str] = None) -> None:
    """Send log records to stderr so they never interleave with menu output."""
    name = (level or os.getenv(LOG_LEVEL_ENV) or "WARNING").upper()
    numeric = logging.getLevelName(name)
    if not isinstance(numeric, int):
        numeric = logging.WARNING
    logging.basicConfig(level=numeric, format=LOG_FORMAT, stream=sys.stderr)
