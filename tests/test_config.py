"""Unit tests for the configuration module."""

# pylint: disable=missing-class-docstring,missing-function-docstring,protected-access

from pathlib import Path

from chat_tables import config
from chat_tables.config import ROOT, _int_env


class TestIntEnv:

    def test_unset_uses_default(self, monkeypatch):
        monkeypatch.delenv("CHAT_TABLES_TEST_INT", raising=False)
        assert _int_env("CHAT_TABLES_TEST_INT", 10) == 10

    def test_valid_value(self, monkeypatch):
        monkeypatch.setenv("CHAT_TABLES_TEST_INT", " 25 ")
        assert _int_env("CHAT_TABLES_TEST_INT", 10) == 25

    def test_non_integer_falls_back(self, monkeypatch, caplog):
        monkeypatch.setenv("CHAT_TABLES_TEST_INT", "ten")
        assert _int_env("CHAT_TABLES_TEST_INT", 10) == 10
        assert "not an integer" in caplog.text

    def test_below_one_falls_back(self, monkeypatch):
        monkeypatch.setenv("CHAT_TABLES_TEST_INT", "0")
        assert _int_env("CHAT_TABLES_TEST_INT", 10) == 10


class TestDefaults:

    def test_rows_per_page_positive(self):
        assert config.DEFAULT_ROWS_PER_PAGE >= 1

    def test_currency_prefix_is_string(self):
        assert isinstance(config.CURRENCY_PREFIX, str)

    def test_root_is_project_root(self):
        """ROOT should point to the project root (contains pyproject.toml)."""
        assert isinstance(ROOT, Path)
        assert (ROOT / "pyproject.toml").exists()
