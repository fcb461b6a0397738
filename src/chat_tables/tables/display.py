"""Page-control display rules for paginated chat tables.

Decides which page-number buttons to render (first, last, current and its
neighbours) and where to collapse the rest into an ellipsis, and validates
free-text "jump to page" input.
"""

import logging
from typing import Callable

from chat_tables.tables.patterns import LEADING_INT_RE

logger = logging.getLogger(__name__)


def should_show_page_number(page_num: int, current_page: int, total_pages: int) -> bool:
    """Return True for the first page, the last page, and pages adjacent to the current one."""
    if page_num in (1, total_pages):
        return True
    return abs(page_num - current_page) <= 1


def should_show_ellipsis(page_num: int, current_page: int, total_pages: int) -> bool:
    """Return True where a collapsed gap starts: after page 1 or before the last page."""
    if page_num == 2 and current_page > 3:
        return True
    return page_num == total_pages - 1 and current_page < total_pages - 2


def page_items(current_page: int, total_pages: int) -> list[int | None]:
    """Build the ordered page-control sequence; None marks an ellipsis.

    >>> page_items(5, 10)
    [1, None, 4, 5, 6, None, 10]
    """
    items: list[int | None] = []
    for page_num in range(1, total_pages + 1):
        if should_show_page_number(page_num, current_page, total_pages):
            items.append(page_num)
        elif should_show_ellipsis(page_num, current_page, total_pages) and items and items[-1] is not None:
            # At most one ellipsis per gap
            items.append(None)
    return items


def validate_jump(input_text: str | None, total_pages: int) -> int | None:
    """Parse jump-to-page input; return the page number, or None if it is not a valid page.

    Reads a leading integer the lenient way ("3", " 3 ", "3rd" and "3.9" all
    mean page 3).
    """
    match = LEADING_INT_RE.match(input_text or "")
    if not match:
        return None
    page_num = int(match.group(1))
    if page_num < 1 or page_num > total_pages:
        return None
    return page_num


def handle_jump_to_page(
    key: int,
    input_text: str | None,
    total_pages: int,
    go_to_page: Callable[[int, int], None],
    clear_input: Callable[[int], None],
) -> bool:
    """Validate jump input and, only if valid, navigate then clear the input field.

    Returns True when the jump happened.  Invalid input leaves all state alone.
    """
    page_num = validate_jump(input_text, total_pages)
    if page_num is None:
        logger.debug("Rejected jump input %r for table %s (%d pages)", input_text, key, total_pages)
        return False
    go_to_page(key, page_num)
    clear_input(key)
    return True
