"""
Tests for environment driven settings.
"""

import logging
import os
import tempfile

import pytest

from gofpatterns import settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (settings.ENV_JOURNAL_PATH, settings.ENV_MAGIC_SQUARE_ATTEMPTS,
                 settings.ENV_LOG_FILE, settings.ENV_LOG_LEVEL):
        monkeypatch.delenv(name, raising=False)


class TestJournalPath:
    def test_default_is_under_temp_dir(self):
        path = settings.get_journal_path()
        assert path == os.path.join(tempfile.gettempdir(), 'gofpatterns', 'journal_entries.txt')

    def test_env_override(self, monkeypatch, tmp_path):
        target = tmp_path / "journal.txt"
        monkeypatch.setenv(settings.ENV_JOURNAL_PATH, str(target))
        assert settings.get_journal_path() == str(target)


class TestMagicSquareAttempts:
    def test_default(self):
        assert settings.get_magic_square_attempts() == 100

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv(settings.ENV_MAGIC_SQUARE_ATTEMPTS, "7")
        assert settings.get_magic_square_attempts() == 7

    @pytest.mark.parametrize("raw", ["abc", "0", "-3", ""])
    def test_invalid_values_fall_back_to_default(self, monkeypatch, raw):
        monkeypatch.setenv(settings.ENV_MAGIC_SQUARE_ATTEMPTS, raw)
        assert settings.get_magic_square_attempts() == settings.DEFAULT_MAGIC_SQUARE_ATTEMPTS


class TestLogging:
    def test_log_file_unset(self):
        assert settings.get_log_file() is None

    def test_log_file_set(self, monkeypatch):
        monkeypatch.setenv(settings.ENV_LOG_FILE, "/tmp/gof.log")
        assert settings.get_log_file() == "/tmp/gof.log"

    def test_default_log_level_is_critical(self):
        assert settings.get_log_level() == logging.CRITICAL

    def test_log_level_by_name(self, monkeypatch):
        monkeypatch.setenv(settings.ENV_LOG_LEVEL, "debug")
        assert settings.get_log_level() == logging.DEBUG

    def test_unknown_log_level_is_critical(self, monkeypatch):
        monkeypatch.setenv(settings.ENV_LOG_LEVEL, "chatty")
        assert settings.get_log_level() == logging.CRITICAL
