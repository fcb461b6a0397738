"""Column classification helpers for chat result tables.

Each column name is mapped to a ColumnType that decides how its cells are
displayed.  Classification is a pure function of the lower-cased name.
"""

import logging
from enum import Enum

from chat_tables.tables.patterns import (
    CURRENCY_EXACT_NAMES,
    CURRENCY_KEYWORDS,
    DATETIME_KEYWORDS,
    NUMBER_KEYWORDS,
)

logger = logging.getLogger(__name__)


class ColumnType(str, Enum):
    """Semantic display type of a table column."""

    CURRENCY = "currency"
    DATETIME = "datetime"
    NUMBER = "number"
    TEXT = "text"


def _spellings(keyword: str) -> tuple[str, ...]:
    """Return the keyword as given plus its space-separated spelling."""
    spaced = keyword.replace("_", " ")
    return (keyword,) if spaced == keyword else (keyword, spaced)


def is_currency_column(name: str) -> bool:
    """Return True if the (lower-cased) name matches a currency keyword or exact name."""
    if any(keyword in name for keyword in CURRENCY_KEYWORDS):
        return True
    return name in CURRENCY_EXACT_NAMES


def is_datetime_column(name: str) -> bool:
    """Return True if the (lower-cased) name mentions a date or time."""
    return any(keyword in name for keyword in DATETIME_KEYWORDS)


def is_number_column(name: str) -> bool:
    """Return True if the (lower-cased) name equals or ends with a count keyword."""
    for keyword in NUMBER_KEYWORDS:
        for spelling in _spellings(keyword):
            if name == spelling or name.endswith(spelling):
                return True
    return False


def classify(column_name: str) -> ColumnType:
    """Classify a column by name.  Currency wins over datetime, datetime over number."""
    name = (column_name or "").lower()
    if is_currency_column(name):
        return ColumnType.CURRENCY
    if is_datetime_column(name):
        return ColumnType.DATETIME
    if is_number_column(name):
        return ColumnType.NUMBER
    return ColumnType.TEXT


def unclassified_columns(columns: list[str]) -> list[str]:
    """Return the column names that fell through to TEXT without matching any keyword.

    These are candidates for an explicit classification decision; each call
    logs them at INFO so new column names show up in the application log.
    """
    unmatched = [col for col in columns if classify(col) is ColumnType.TEXT]
    if unmatched:
        logger.info("Columns without a keyword match (displayed as text): %s", ", ".join(unmatched))
    return unmatched
