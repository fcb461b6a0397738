"""Cell value and header formatting for chat result tables.

Values are rendered according to the ColumnType of their column:

  currency  -- Indonesian Rupiah, no decimals, e.g. "Rp 50.000"
  datetime  -- short Indonesian date + short time, e.g. "15/01/24, 13.45"
  number    -- unchanged
  text      -- unchanged

Formatting never raises on bad data: unparsable amounts render as zero and
unparsable dates are returned as-is.
"""

import logging
import math
from datetime import date, datetime, timezone, tzinfo
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Protocol
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from chat_tables.config import CURRENCY_PREFIX, DISPLAY_TIMEZONE
from chat_tables.tables.classifiers import ColumnType, classify
from chat_tables.tables.patterns import DAY_FIRST_DATE_RE, HEADER_WORD_RE, LEADING_FLOAT_RE

logger = logging.getLogger(__name__)

# Separator between the currency symbol and the amount
NBSP = "\u00a0"


class CellFormatter(Protocol):  # pylint: disable=too-few-public-methods
    """Anything that turns a raw cell value into its display string."""

    def __call__(self, value: Any, column_name: str) -> str: ...


# ─── Value Parsing ────────────────────────────────────────────────────────────


def parse_amount(value: Any) -> float:
    """Read a numeric amount leniently; anything unparsable (or non-finite) is 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float, Decimal)):
        amount = float(value)
    else:
        match = LEADING_FLOAT_RE.match(str(value))
        if not match:
            return 0.0
        amount = float(match.group(1))
    return amount if math.isfinite(amount) else 0.0


def parse_datetime(value: Any) -> datetime | None:
    """Parse a calendar date/time, returning None when the value is not one."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        # Numeric timestamps are epoch milliseconds, anchored to UTC
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None

    text = str(value).strip()
    if not text:
        return None

    match = DAY_FIRST_DATE_RE.match(text)
    if match:
        parts = {k: int(v) for k, v in match.groupdict().items() if v is not None}
        try:
            return datetime(
                parts["year"],
                parts["month"],
                parts["day"],
                parts.get("hour", 0),
                parts.get("minute", 0),
                parts.get("second", 0),
            )
        except ValueError:
            return None

    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


# ─── Value Rendering ──────────────────────────────────────────────────────────


def format_currency(amount: float, prefix: str = CURRENCY_PREFIX, thousands_sep: str = ".") -> str:
    """Render an amount as whole currency units with grouped thousands, e.g. 'Rp 50.000'."""
    # Ties round away from zero (1500.5 -> 1501, -0.5 -> -1)
    rounded = int(Decimal(str(amount)).quantize(Decimal(1), rounding=ROUND_HALF_UP))
    grouped = f"{abs(rounded):,}".replace(",", thousands_sep)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{prefix}{NBSP}{grouped}"


def format_datetime(moment: datetime, display_tz: tzinfo | None = None) -> str:
    """Render a datetime in short Indonesian style: 'dd/mm/yy, HH.MM'."""
    if moment.tzinfo is not None:
        moment = moment.astimezone(display_tz)
    return f"{moment:%d/%m/%y}, {moment:%H.%M}"


def _as_text(value: Any) -> str:
    """Stringify a raw value for display; None becomes an empty string."""
    return "" if value is None else str(value)


def _resolve_timezone(name: str) -> tzinfo | None:
    """Look up an IANA timezone; empty or unknown names mean local time."""
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown display timezone %r, using local time", name)
        return None


class IndonesianCellFormatter:
    """Configurable CellFormatter using Indonesian display conventions."""

    def __init__(self, currency_prefix: str = CURRENCY_PREFIX, thousands_sep: str = ".", timezone: str = DISPLAY_TIMEZONE):
        self.currency_prefix = currency_prefix
        self.thousands_sep = thousands_sep
        self.display_tz = _resolve_timezone(timezone)

    def __call__(self, value: Any, column_name: str) -> str:
        column_type = classify(column_name)

        if column_type is ColumnType.CURRENCY:
            return format_currency(parse_amount(value), self.currency_prefix, self.thousands_sep)

        if column_type is ColumnType.DATETIME:
            moment = parse_datetime(value)
            if moment is None:
                return _as_text(value)
            return format_datetime(moment, self.display_tz)

        # NUMBER and TEXT are displayed as given
        return _as_text(value)


_DEFAULT_FORMATTER = IndonesianCellFormatter()


def format_cell(value: Any, column_name: str) -> str:
    """Format a raw cell value for display using the default Indonesian formatter."""
    return _DEFAULT_FORMATTER(value, column_name)


def format_header(raw_key: str | None) -> str:
    """Turn a raw column key into a display header: 'jumlah_nasabah' -> 'Jumlah Nasabah'."""
    if not raw_key:
        return ""
    if raw_key == "id":
        return "No."
    return HEADER_WORD_RE.sub(lambda m: m.group(0).upper(), raw_key.replace("_", " "))
