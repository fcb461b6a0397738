"""Keyword tuples and compiled regex patterns for table cell classification.

Column types are inferred from column names alone (the data source sends no
schema), so these keyword lists are the whole classification contract.  Used
by classifiers.py, formatting.py and display.py.
"""

import re

# ─── Column-Name Keywords ─────────────────────────────────────────────────────

# Substring match, checked in order; first hit classifies the column as currency
CURRENCY_KEYWORDS = (
    "saldo",
    "debit",
    "kredit",
    "nominal",
    "amount",
    "harga",
    "biaya",
    "bayar",
    "keuntungan_bank",
    "keuntungan_bulan_lalu",
)

# Exact column names that are currency even though "total" alone is ambiguous
CURRENCY_EXACT_NAMES = ("total", "total_saldo", "total_nominal")

# Substring match for date/time columns
DATETIME_KEYWORDS = ("tanggal", "waktu", "date", "time")

# Equals-or-endswith match for plain count columns.  Source data uses either
# "_" or " " as the word separator, so both spellings are checked.
NUMBER_KEYWORDS = (
    "jumlah_nasabah",
    "jumlah_transaksi",
    "count",
    "penabung",
    "nasabah",
    "transaksi",
    "jumlah",
    "total_nasabah",
    "total_penabung",
    "total_transaksi",
    "keuntungan_bulan_lalu",
)


# ─── Value Parsing Patterns ───────────────────────────────────────────────────

# Leading float literal, read the way a lenient parser reads "50000abc" -> 50000
LEADING_FLOAT_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

# Leading integer literal, "3abc" -> 3, "2.7" -> 2
LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")

# Day-first dates such as "15/01/2024" or "15-01-2024 13:45"
DAY_FIRST_DATE_RE = re.compile(
    r"^(?P<day>\d{1,2})[/-](?P<month>\d{1,2})[/-](?P<year>\d{4})"
    r"(?:[ T](?P<hour>\d{1,2}):(?P<minute>\d{2})(?::(?P<second>\d{2}))?)?$"
)

# Characters separating words in a header key
HEADER_WORD_RE = re.compile(r"\b\w")
