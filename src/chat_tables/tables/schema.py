"""Pydantic models for per-table pagination state and rendered page snapshots.

TableState is the mutable session kept for each table in a conversation.
TablePage is the read-only view handed to the rendering layer.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from chat_tables.config import DEFAULT_ROWS_PER_PAGE


class TableState(BaseModel):
    """Pagination, search and jump-input state for one table (one message index).

    current_page is not range-checked; callers keep it inside [1, total_pages].
    """

    model_config = ConfigDict(validate_assignment=True)

    current_page: int = 1
    rows_per_page: int = Field(default=DEFAULT_ROWS_PER_PAGE, ge=1)
    search_query: str = ""
    jump_input: str = ""


class TablePage(BaseModel):
    """Everything needed to draw one page of a table inside a chat message."""

    model_config = ConfigDict(frozen=True)

    key: int
    headers: list[str]
    rows: list[list[str]]
    current_page: int
    total_pages: int = Field(ge=1)
    rows_per_page: int = Field(ge=1)
    filtered_row_count: int = Field(ge=0)
    total_row_count: int = Field(ge=0)
    search_query: str = ""
    page_items: list[int | None] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_page_size(self) -> "TablePage":
        """Ensure a page never carries more rows than rows_per_page."""
        if len(self.rows) > self.rows_per_page:
            raise ValueError(f"Page has {len(self.rows)} rows, expected at most {self.rows_per_page}")
        return self

    @property
    def is_filtered(self) -> bool:
        """True when an active search narrowed the rows."""
        return bool(self.search_query.strip())
