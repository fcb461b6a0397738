"""Shared configuration for chat table formatting and pagination.

Values are read once at import time from the environment (and an optional
``.env`` file at the project root).
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

ROOT = Path(__file__).parent.parent.parent.resolve()
load_dotenv(ROOT / ".env")


def _int_env(name: str, default: int) -> int:
    """Read a positive integer from the environment, falling back to ``default``."""
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r (not an integer); using %d", name, raw, default)
        return default
    if value < 1:
        logger.warning("Ignoring %s=%d (must be >= 1); using %d", name, value, default)
        return default
    return value


# Rows shown per page when a table is first initialised
DEFAULT_ROWS_PER_PAGE = _int_env("CHAT_TABLES_ROWS_PER_PAGE", 10)

# Currency indicator placed before formatted amounts
CURRENCY_PREFIX = os.getenv("CHAT_TABLES_CURRENCY_PREFIX", "Rp")

# IANA timezone for displaying timezone-aware datetimes ("" = local time)
DISPLAY_TIMEZONE = os.getenv("CHAT_TABLES_TIMEZONE", "")
