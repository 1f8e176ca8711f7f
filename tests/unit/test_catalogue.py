"""
Tests for the demo registry and the catalogue driver.
"""

import logging
from unittest.mock import Mock, call, patch

import pytest

from gofpatterns import catalogue
from gofpatterns.catalogue import (
    CATEGORIES, DEMO_REGISTRY, DemoInfo, capture_demo_output, configure_logging,
    get_demo, list_demos, normalize_name, run_all, run_category, run_demo, run_demos,
)
from gofpatterns.error_handler_util import UnknownDemoError
from gofpatterns.settings import ENV_JOURNAL_PATH, ENV_LOG_FILE


@pytest.fixture(autouse=True)
def journal_in_tmp(monkeypatch, tmp_path):
    monkeypatch.setenv(ENV_JOURNAL_PATH, str(tmp_path / "journal.txt"))


@pytest.fixture
def fake_registry():
    """Replace the registry with two recorded demos, the second failing."""
    ok = Mock()
    broken = Mock(side_effect=RuntimeError("kaput"))
    registry = {
        'ok_demo': DemoInfo('ok_demo', 'solid', "OK", "works", ok),
        'broken_demo': DemoInfo('broken_demo', 'solid', "Broken", "raises", broken),
    }
    with patch.dict(catalogue.DEMO_REGISTRY, registry, clear=True):
        yield ok, broken


class TestRegistry:
    def test_every_category_has_demos(self):
        assert {demo.category for demo in DEMO_REGISTRY.values()} == set(CATEGORIES)
        assert len(DEMO_REGISTRY) == 19

    def test_order_follows_categories(self):
        order = [CATEGORIES.index(demo.category) for demo in list_demos()]
        assert order == sorted(order)

    def test_list_by_category(self):
        names = [demo.name for demo in list_demos('behavioral')]
        assert names == ['chain_of_responsibility', 'command', 'interpreter']

    def test_list_unknown_category(self):
        with pytest.raises(UnknownDemoError, match="Valid categories"):
            list_demos('quantum')

    @pytest.mark.parametrize("name", ["Chain-Of-Responsibility", " chain_of_responsibility ", "CHAIN_of-responsibility"])
    def test_names_are_normalized(self, name):
        assert normalize_name(name) == "chain_of_responsibility"
        assert get_demo(name).title == "Chain of Responsibility"

    def test_unknown_demo_lists_valid_names(self):
        with pytest.raises(UnknownDemoError) as exc_info:
            get_demo("visitor")
        assert isinstance(exc_info.value, KeyError)
        assert "Unknown demo 'visitor'" in str(exc_info.value)
        assert "interpreter" in str(exc_info.value)


class TestDriver:
    def test_run_demo(self, capsys):
        run_demo('command')
        assert "balance after withdraw undo: 1000" in capsys.readouterr().out

    def test_run_category_returns_no_failures(self, capsys):
        assert run_category('structural') == []
        out = capsys.readouterr().out
        assert "\nAdapter\n" in out and "\nProxy\n" in out

    def test_failures_are_logged_and_skipped(self, fake_registry, caplog):
        ok, broken = fake_registry
        with caplog.at_level(logging.ERROR, logger='GoFPatterns.Catalogue'):
            failed = run_category('solid')
        assert failed == ['broken_demo']
        ok.assert_called_once()
        assert "Demo 'broken_demo' failed: kaput" in caplog.text

    def test_run_demos_in_given_order(self, fake_registry, caplog):
        ok, broken = fake_registry
        manager = Mock()
        manager.attach_mock(ok, 'ok')
        manager.attach_mock(broken, 'broken')
        with caplog.at_level(logging.ERROR, logger='GoFPatterns.Catalogue'):
            failed = run_demos(['Broken-Demo', 'ok_demo'])
        assert manager.mock_calls == [call.broken(), call.ok()]
        assert failed == ['broken_demo']
        assert "Demo 'broken_demo' failed: kaput" in caplog.text

    def test_run_demos_unknown_name_runs_nothing(self, fake_registry):
        ok, _ = fake_registry
        with pytest.raises(UnknownDemoError, match="visitor"):
            run_demos(['ok_demo', 'visitor'])
        ok.assert_not_called()

    def test_run_all_prints_banner_and_headings(self, fake_registry, capsys):
        failed = run_all()
        out = capsys.readouterr().out
        assert out.startswith("GOF Design Patterns\n")
        for heading in ("SOLID", "Creational", "Structural", "Behavioral"):
            assert f"\n{heading}\n" in out
        assert failed == ['broken_demo']

    def test_capture_demo_output(self, capsys):
        text = capture_demo_output('decorator')
        assert "Margherita, with Cheese, with Tomatoes $27" in text
        assert capsys.readouterr().out == ""


class TestConfigureLogging:
    def test_console_handler_defaults_to_critical(self, monkeypatch):
        monkeypatch.delenv(ENV_LOG_FILE, raising=False)
        root = configure_logging()
        assert len(root.handlers) == 1
        assert root.handlers[0].level == logging.CRITICAL

    def test_file_handler_added(self, tmp_path):
        log_file = tmp_path / "debug.log"
        root = configure_logging(level=logging.DEBUG, log_file=str(log_file))
        try:
            assert [h.level for h in root.handlers] == [logging.DEBUG, logging.DEBUG]
            logging.getLogger('GoFPatterns.Test').debug("hello file")
            root.handlers[1].flush()
            assert "GoFPatterns.Test - DEBUG - hello file" in log_file.read_text()
        finally:
            configure_logging(log_file=None)

    def test_reconfiguring_replaces_handlers(self, monkeypatch):
        monkeypatch.delenv(ENV_LOG_FILE, raising=False)
        configure_logging()
        root = configure_logging()
        assert len(root.handlers) == 1
