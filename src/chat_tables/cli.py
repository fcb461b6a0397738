"""Preview a chat result table from the command line.

Reads a JSON file of the form {"columns": [...], "rows": [[...], ...]},
applies an optional search and page jump, and prints the page as markdown
exactly as it would appear inside a chat message.

Usage:
    chat-tables data/result.json --search "50.000" --page 2
    python -m chat_tables.cli data/result.json --rows-per-page 5 --show-unclassified
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError

from chat_tables.config import DEFAULT_ROWS_PER_PAGE
from chat_tables.tables.classifiers import unclassified_columns
from chat_tables.tables.pagination import TablePaginator
from chat_tables.tables.registry import TableRegistry
from chat_tables.tables.rendering import build_page, render_markdown

logger = logging.getLogger(__name__)

# Exit status for unreadable or malformed input
EXIT_BAD_INPUT = 2

# A single preview only ever shows one table
PREVIEW_KEY = 0


class TableFile(BaseModel):
    """On-disk shape of a result set."""

    columns: list[str]
    rows: list[list[Any]]


def load_table(path: Path) -> TableFile:
    """Read and validate a table JSON file.  Raises OSError or ValidationError."""
    return TableFile.model_validate_json(path.read_text(encoding="utf-8"))


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render one page of a chat result table as markdown.")
    parser.add_argument("file", type=Path, help="JSON file with 'columns' and 'rows'")
    parser.add_argument("--page", default="", help="Page to jump to (validated like the jump-to-page field)")
    parser.add_argument("--rows-per-page", type=int, default=DEFAULT_ROWS_PER_PAGE, help="Rows per page")
    parser.add_argument("--search", default="", help="Search text matched against formatted cell values")
    parser.add_argument("--show-unclassified", action="store_true", help="Report columns that fall back to plain text")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def run(args: argparse.Namespace) -> int:
    """Render the requested page to stdout and return the process exit status."""
    try:
        table = load_table(args.file)
    except OSError as exc:
        print(f"error: cannot read {args.file}: {exc}", file=sys.stderr)
        return EXIT_BAD_INPUT
    except ValidationError as exc:
        print(f"error: {args.file} is not a valid table file:\n{exc}", file=sys.stderr)
        return EXIT_BAD_INPUT

    if args.rows_per_page < 1:
        print("error: --rows-per-page must be at least 1", file=sys.stderr)
        return EXIT_BAD_INPUT

    paginator = TablePaginator(TableRegistry(default_rows_per_page=args.rows_per_page))
    paginator.init_pagination(PREVIEW_KEY, len(table.rows))

    if args.search:
        paginator.update_search(PREVIEW_KEY, args.search)

    if args.page:
        filtered_count = paginator.get_filtered_row_count(PREVIEW_KEY, table.rows, table.columns)
        total_pages = paginator.get_total_pages(PREVIEW_KEY, filtered_count)
        paginator.update_jump_input(PREVIEW_KEY, args.page)
        if not paginator.jump_to_page(PREVIEW_KEY, total_pages):
            logger.warning("Ignoring --page %r: not a page between 1 and %d", args.page, total_pages)

    if args.show_unclassified:
        for column in unclassified_columns(table.columns):
            print(f"unclassified column: {column}", file=sys.stderr)

    page = build_page(paginator, PREVIEW_KEY, table.rows, table.columns)
    print(render_markdown(page))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Console entry point."""
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
