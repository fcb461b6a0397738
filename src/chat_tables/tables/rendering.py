"""Page snapshots and markdown rendering for tables inside chat messages."""

import logging
from typing import Any, Sequence

from chat_tables.tables.display import page_items
from chat_tables.tables.formatting import format_header
from chat_tables.tables.pagination import TablePaginator
from chat_tables.tables.schema import TablePage

logger = logging.getLogger(__name__)


def build_page(paginator: TablePaginator, key: int, rows: Sequence[Sequence[Any]], columns: Sequence[str]) -> TablePage:
    """Assemble the current page of table ``key`` with formatted headers and cells.

    Initialises the table on first use.  Row widths are not checked against
    ``columns``; extra cells are dropped and missing cells are simply absent.

    current_page is reported as stored.  go_to_page does not range-check, so
    after an unchecked jump the snapshot can read "Page 99 of 3" with no rows
    and page_items(99, 3) == [1, None, 3]; validate_jump is the guard.
    """
    paginator.init_pagination(key, len(rows))
    state = paginator.registry.ensure(key)

    filtered_count = paginator.get_filtered_row_count(key, rows, columns)
    # An empty result still shows as "page 1 of 1"
    total_pages = max(paginator.get_total_pages(key, filtered_count), 1)
    page_rows = paginator.get_paginated_rows(key, rows, columns)

    formatted_rows = [[paginator.formatter(value, col) for value, col in zip(row, columns)] for row in page_rows]

    return TablePage(
        key=key,
        headers=[format_header(col) for col in columns],
        rows=formatted_rows,
        current_page=state.current_page,
        total_pages=total_pages,
        rows_per_page=state.rows_per_page,
        filtered_row_count=filtered_count,
        total_row_count=len(rows),
        search_query=state.search_query,
        page_items=page_items(state.current_page, total_pages),
    )


def _escape_cell(text: str) -> str:
    """Keep cell text on one line and stop pipes from splitting columns."""
    return text.replace("|", "\\|").replace("\r", " ").replace("\n", " ")


def _render_page_controls(page: TablePage) -> str:
    """Render page_items as e.g. '1 … 4 **5** 6 … 10'."""
    parts = []
    for item in page.page_items:
        if item is None:
            parts.append("…")
        elif item == page.current_page:
            parts.append(f"**{item}**")
        else:
            parts.append(str(item))
    return " ".join(parts)


def render_markdown(page: TablePage) -> str:
    """Convert a TablePage into a markdown table followed by a status line and page controls."""
    lines: list[str] = []

    # Header row + separator
    lines.append("| " + " | ".join(_escape_cell(h) for h in page.headers) + " |")
    lines.append("| " + " | ".join(["---"] * len(page.headers)) + " |")

    # Data rows
    for row in page.rows:
        lines.append("| " + " | ".join(_escape_cell(cell) for cell in row) + " |")

    lines.append("")
    if not page.rows:
        lines.append("_No matching rows._")
        lines.append("")

    status = f"Page {page.current_page} of {page.total_pages} · {page.filtered_row_count} rows"
    if page.is_filtered:
        status += f" (filtered from {page.total_row_count})"
    lines.append(status)

    controls = _render_page_controls(page)
    if controls:
        lines.append(controls)

    return "\n".join(lines)
