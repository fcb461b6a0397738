"""Registry of per-table state, keyed by message index.

Owned by whatever holds the conversation's message list and passed by
reference to TablePaginator.  Entries live until the owner removes them.
"""

import logging
from typing import Iterator

from chat_tables.config import DEFAULT_ROWS_PER_PAGE
from chat_tables.tables.schema import TableState

logger = logging.getLogger(__name__)


class TableRegistry:
    """Mapping of table key -> TableState with idempotent creation."""

    def __init__(self, default_rows_per_page: int = DEFAULT_ROWS_PER_PAGE):
        self.default_rows_per_page = default_rows_per_page
        self._tables: dict[int, TableState] = {}

    def get(self, key: int) -> TableState | None:
        """Return the state for ``key``, or None if the table was never initialised."""
        return self._tables.get(key)

    def ensure(self, key: int) -> TableState:
        """Return the state for ``key``, creating a fresh one on first use."""
        state = self._tables.get(key)
        if state is None:
            state = TableState(rows_per_page=self.default_rows_per_page)
            self._tables[key] = state
            logger.info("Table %s initialised (%d rows per page)", key, state.rows_per_page)
        return state

    def remove(self, key: int) -> bool:
        """Drop the state for ``key`` (e.g. its message left the conversation)."""
        if key not in self._tables:
            return False
        del self._tables[key]
        logger.info("Table %s removed", key)
        return True

    def clear(self) -> None:
        """Drop every table's state."""
        if self._tables:
            logger.info("Clearing %d tables", len(self._tables))
        self._tables.clear()

    def keys(self) -> list[int]:
        return list(self._tables)

    def __contains__(self, key: object) -> bool:
        return key in self._tables

    def __len__(self) -> int:
        return len(self._tables)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._tables))
