"""
Tests for the urwid catalogue browser, driven without a main loop.
"""

import logging
from unittest.mock import Mock, patch

import pytest
import urwid

from gofpatterns.catalogue import configure_logging, list_demos
from gofpatterns.settings import ENV_LOG_FILE
from gofpatterns.tui.catalogue_browser import FOOTER_TEXT, PLACEHOLDER_TEXT, CatalogueBrowser, DemoListItem
from gofpatterns.tui.key_bindings import KEY_CLEAR_OUTPUT, KEY_QUIT, KEY_SELECT


@pytest.fixture
def runner():
    return Mock(return_value="\nBridge\n\nrendering circle as raster: 5.0\n")


@pytest.fixture
def browser(runner):
    return CatalogueBrowser(runner=runner)


def output_text(browser):
    return browser.output.get_text()[0]


def test_lists_every_demo(browser):
    assert len(browser.demo_walker) == len(list_demos())
    assert all(isinstance(item, DemoListItem) for item in browser.demo_walker)
    assert output_text(browser) == PLACEHOLDER_TEXT


def test_enter_runs_focused_demo(browser, runner):
    browser.demo_list.focus_position = 10
    browser.unhandled_input(KEY_SELECT)

    runner.assert_called_once_with(list_demos()[10].name)
    assert output_text(browser) == "Bridge\n\nrendering circle as raster: 5.0"


def test_failed_demo_shows_error(browser, runner):
    runner.side_effect = RuntimeError("kaput")
    browser.unhandled_input(KEY_SELECT)
    assert "failed: kaput" in output_text(browser)


def test_empty_output(browser, runner):
    runner.return_value = ""
    browser.unhandled_input(KEY_SELECT)
    assert output_text(browser).endswith("printed nothing.")


def test_clear_output(browser):
    browser.unhandled_input(KEY_SELECT)
    browser.unhandled_input(KEY_CLEAR_OUTPUT)
    assert output_text(browser) == PLACEHOLDER_TEXT


@pytest.mark.parametrize("key", [KEY_QUIT, 'q'])
def test_quit_keys(browser, key):
    with pytest.raises(urwid.ExitMainLoop):
        browser.unhandled_input(key)


def test_no_demos(runner):
    browser = CatalogueBrowser(demos=[], runner=runner)
    assert browser.selected_demo() is None
    browser.unhandled_input(KEY_SELECT)
    runner.assert_not_called()


def test_real_demo_output_is_captured():
    browser = CatalogueBrowser()
    browser.demo_list.focus_position = [d.name for d in browser.demos].index('decorator')
    browser.run_selected()
    assert "Tomatoes(Cheese(Italian))" in output_text(browser)


@pytest.fixture
def debug_console(monkeypatch):
    """Restore the GoFPatterns handlers after a test reconfigures logging."""
    monkeypatch.delenv(ENV_LOG_FILE, raising=False)
    root = logging.getLogger('GoFPatterns')
    saved_handlers, saved_level = root.handlers[:], root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in saved_handlers:
        root.addHandler(handler)
    root.setLevel(saved_level)


class TestLoggingStaysOffScreen:
    def test_run_selected_writes_nothing_to_stderr(self, debug_console, capsys):
        configure_logging(level=logging.DEBUG)
        browser = CatalogueBrowser()
        browser.demo_list.focus_position = [d.name for d in browser.demos].index('interface_segregation')

        browser.run_selected()

        assert capsys.readouterr().err == ""
        assert "Printer cannot scan" in output_text(browser)

    def test_failing_demo_writes_nothing_to_stderr(self, debug_console, capsys):
        configure_logging(level=logging.DEBUG)
        browser = CatalogueBrowser(runner=Mock(side_effect=RuntimeError("kaput")))

        browser.run_selected()

        assert capsys.readouterr().err == ""
        assert "failed: kaput" in output_text(browser)

    def test_console_handler_restored_afterwards(self, debug_console, capsys):
        configure_logging(level=logging.DEBUG)
        CatalogueBrowser(runner=Mock(return_value="")).run_selected()

        logging.getLogger('GoFPatterns.Test').warning("back on the console")
        assert "back on the console" in capsys.readouterr().err

    def test_main_loop_runs_without_console_handler(self, debug_console):
        configure_logging(level=logging.DEBUG)
        browser = CatalogueBrowser()
        seen = []

        def fake_run():
            seen.extend(type(h) for h in debug_console.handlers)

        with patch('gofpatterns.tui.catalogue_browser.urwid.MainLoop') as mock_loop:
            mock_loop.return_value.run.side_effect = fake_run
            browser.run()

        assert logging.StreamHandler not in seen
        assert logging.StreamHandler in [type(h) for h in debug_console.handlers]


def test_footer_mentions_output_scrolling():
    assert "scroll output" in FOOTER_TEXT
