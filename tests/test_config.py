"""Unit tests for configuration parsing helpers."""

import pytest

from ptbr_metaphone.config import load_bool, load_int, parse_bool


class TestParseBool:
    @pytest.mark.parametrize("raw", ["true", "TRUE", " 1 ", "yes", "on"])
    def test_true_values(self, raw):
        assert parse_bool(raw) is True

    @pytest.mark.parametrize("raw", ["false", "False", "0", "no", "off"])
    def test_false_values(self, raw):
        assert parse_bool(raw) is False

    def test_rejects_anything_else(self):
        with pytest.raises(ValueError):
            parse_bool("sometimes")


class TestLoadBool:
    def test_default_when_unset(self, monkeypatch):
        monkeypatch.delenv("PTBR_METAPHONE_TEST_FLAG", raising=False)
        assert load_bool("PTBR_METAPHONE_TEST_FLAG", True) is True

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("PTBR_METAPHONE_TEST_FLAG", "false")
        assert load_bool("PTBR_METAPHONE_TEST_FLAG", True) is False

    def test_blank_means_default(self, monkeypatch):
        monkeypatch.setenv("PTBR_METAPHONE_TEST_FLAG", "  ")
        assert load_bool("PTBR_METAPHONE_TEST_FLAG", False) is False

    def test_invalid_value_names_the_variable(self, monkeypatch):
        monkeypatch.setenv("PTBR_METAPHONE_TEST_FLAG", "maybe")
        with pytest.raises(ValueError, match="PTBR_METAPHONE_TEST_FLAG"):
            load_bool("PTBR_METAPHONE_TEST_FLAG", True)


class TestLoadInt:
    def test_default_when_unset(self, monkeypatch):
        monkeypatch.delenv("PTBR_METAPHONE_TEST_INT", raising=False)
        assert load_int("PTBR_METAPHONE_TEST_INT", 7) == 7

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("PTBR_METAPHONE_TEST_INT", "42")
        assert load_int("PTBR_METAPHONE_TEST_INT", 7) == 42

    def test_rejects_non_integer(self, monkeypatch):
        monkeypatch.setenv("PTBR_METAPHONE_TEST_INT", "many")
        with pytest.raises(ValueError, match="must be an integer"):
            load_int("PTBR_METAPHONE_TEST_INT", 7)

    def test_rejects_non_positive(self, monkeypatch):
        monkeypatch.setenv("PTBR_METAPHONE_TEST_INT", "0")
        with pytest.raises(ValueError, match="must be positive"):
            load_int("PTBR_METAPHONE_TEST_INT", 7)
