"""Search and pagination over the tables rendered inside chat messages.

Rows are always filtered first and paginated second, so page counts and page
slices reflect the active search.  Search compares against the *formatted*
cell values the user actually sees (e.g. "50.000" finds a raw 50000 in a
currency column), using whichever CellFormatter the paginator was given.

Operations on a key that was never initialised degrade gracefully: no
filtering, no slicing, one page.
"""

import logging
import math
from typing import Any, Sequence

from chat_tables.tables.display import handle_jump_to_page
from chat_tables.tables.formatting import NBSP, CellFormatter, format_cell
from chat_tables.tables.registry import TableRegistry

logger = logging.getLogger(__name__)

Row = Sequence[Any]


def _normalise(text: str) -> str:
    """Lower-case for matching; non-breaking spaces compare equal to spaces."""
    return text.replace(NBSP, " ").lower()


class TablePaginator:
    """Per-table search, pagination and jump-to-page operations over a TableRegistry."""

    def __init__(self, registry: TableRegistry | None = None, formatter: CellFormatter = format_cell):
        self.registry = registry if registry is not None else TableRegistry()
        self.formatter = formatter

    # ── Initialisation ──────────────────────────────────────────────────────

    def init_pagination(self, key: int, total_rows: int = 0) -> None:
        """Ensure pagination, search and jump state exist for ``key``.  Never resets a live session."""
        is_new = key not in self.registry
        self.registry.ensure(key)
        if is_new:
            logger.debug("Table %s has %d rows", key, total_rows)

    def init_search(self, key: int) -> None:
        """Ensure search state exists for ``key``.

        Search, pagination and jump input share one TableState, so this also
        creates pagination state (page 1, default page size); a search-only
        table without paging does not exist.
        """
        self.registry.ensure(key)

    def remove(self, key: int) -> bool:
        """Forget a table, e.g. when its message is deleted."""
        return self.registry.remove(key)

    # ── Search ──────────────────────────────────────────────────────────────

    def update_search(self, key: int, query: str) -> None:
        """Set the search query and restart browsing from page 1."""
        state = self.registry.get(key)
        if state is None:
            return
        state.search_query = query
        state.current_page = 1
        logger.debug("Table %s search set to %r", key, query)

    def clear_search(self, key: int) -> None:
        self.update_search(key, "")

    def get_filtered_rows(self, key: int, all_rows: Sequence[Row], columns: Sequence[str]) -> Sequence[Row]:
        """Return the rows where any formatted cell contains the search query (case-insensitive).

        With no active query the input sequence itself is returned.
        """
        state = self.registry.get(key)
        search_query = state.search_query if state is not None else ""
        if not search_query.strip():
            return all_rows

        query = _normalise(search_query.strip())
        return [row for row in all_rows if self._row_matches(row, columns, query)]

    def _row_matches(self, row: Row, columns: Sequence[str], query: str) -> bool:
        """True if at least one cell's displayed value contains ``query``."""
        for cell_value, column_name in zip(row, columns):
            if query in _normalise(str(self.formatter(cell_value, column_name))):
                return True
        return False

    def get_filtered_row_count(self, key: int, all_rows: Sequence[Row], columns: Sequence[str]) -> int:
        return len(self.get_filtered_rows(key, all_rows, columns))

    # ── Pagination ──────────────────────────────────────────────────────────

    def get_paginated_rows(self, key: int, all_rows: Sequence[Row], columns: Sequence[str]) -> Sequence[Row]:
        """Return the current page of the filtered rows (all filtered rows if ``key`` is unknown)."""
        filtered_rows = self.get_filtered_rows(key, all_rows, columns)

        state = self.registry.get(key)
        if state is None:
            return filtered_rows

        start = (state.current_page - 1) * state.rows_per_page
        end = start + state.rows_per_page
        # Slices clamp at 0, so a nonsensical page yields no rows rather than wrapping
        return filtered_rows[max(start, 0) : max(end, 0)]

    def get_total_pages(self, key: int, total_filtered_rows: int) -> int:
        """Return ceil(rows / rows_per_page); 1 when ``key`` is unknown."""
        state = self.registry.get(key)
        if state is None:
            return 1
        return math.ceil(total_filtered_rows / state.rows_per_page)

    def go_to_page(self, key: int, page: int) -> None:
        """Move to ``page``.  No bounds check here; validate_jump or the UI guarantees range."""
        state = self.registry.get(key)
        if state is None:
            return
        state.current_page = page
        logger.debug("Table %s moved to page %d", key, page)

    def change_rows_per_page(self, key: int, new_rows_per_page: int) -> None:
        """Change the page size and return to page 1.

        Raises pydantic.ValidationError if ``new_rows_per_page`` is below 1.
        """
        state = self.registry.get(key)
        if state is None:
            return
        state.rows_per_page = new_rows_per_page
        state.current_page = 1
        logger.debug("Table %s now shows %d rows per page", key, new_rows_per_page)

    # ── Jump-to-page input ──────────────────────────────────────────────────

    def get_jump_input(self, key: int) -> str:
        state = self.registry.get(key)
        return state.jump_input if state is not None else ""

    def update_jump_input(self, key: int, value: str) -> None:
        state = self.registry.get(key)
        if state is not None:
            state.jump_input = value

    def clear_jump_input(self, key: int) -> None:
        self.update_jump_input(key, "")

    def jump_to_page(self, key: int, total_pages: int) -> bool:
        """Jump to the page typed into the jump input.  Returns False (and changes nothing) if invalid."""
        return handle_jump_to_page(key, self.get_jump_input(key), total_pages, self.go_to_page, self.clear_jump_input)
