"""Tests for environment-driven configuration."""

import pytest

from poker_scorer import config
from poker_scorer.exceptions import ConfigError


class TestDefaultSeed:
    """Tests for get_default_seed."""

    def test_unset(self, monkeypatch):
        monkeypatch.delenv("POKER_SCORER_SEED", raising=False)
        assert config.get_default_seed() is None

    def test_blank(self, monkeypatch):
        monkeypatch.setenv("POKER_SCORER_SEED", "  ")
        assert config.get_default_seed() is None

    def test_integer(self, monkeypatch):
        monkeypatch.setenv("POKER_SCORER_SEED", " 42 ")
        assert config.get_default_seed() == 42

    def test_not_an_integer(self, monkeypatch):
        monkeypatch.setenv("POKER_SCORER_SEED", "forty-two")
        with pytest.raises(ConfigError) as exc_info:
            config.get_default_seed()
        assert exc_info.value.name == "POKER_SCORER_SEED"
        assert exc_info.value.value == "forty-two"


class TestLogLevel:
    """Tests for get_log_level."""

    def test_default(self, monkeypatch):
        monkeypatch.delenv("POKER_SCORER_LOG_LEVEL", raising=False)
        assert config.get_log_level() == "WARNING"

    def test_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("POKER_SCORER_LOG_LEVEL", "debug")
        assert config.get_log_level() == "DEBUG"

    def test_unknown_level(self, monkeypatch):
        monkeypatch.setenv("POKER_SCORER_LOG_LEVEL", "BOGUS")
        with pytest.raises(ConfigError):
            config.get_log_level()
