"""Shared test configuration and fixtures."""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from chat_tables.tables.pagination import TablePaginator
from chat_tables.tables.registry import TableRegistry

# Load .env from project root for all tests
root = Path(__file__).parent.parent.resolve()
load_dotenv(root / ".env")


@pytest.fixture
def columns() -> list[str]:
    return ["tanggal", "jumlah_nasabah", "saldo"]


@pytest.fixture
def rows() -> list[list[str]]:
    """25 rows: dates 2024-01-01..25, counts 100..124, balances 10.000..250.000."""
    return [[f"2024-01-{i + 1:02d}", str(100 + i), str((i + 1) * 10000)] for i in range(25)]


@pytest.fixture
def paginator() -> TablePaginator:
    """Paginator over a fresh registry with the stock page size of 10."""
    return TablePaginator(TableRegistry(default_rows_per_page=10))
