"""
Interactive catalogue browser.

Demos are listed on the left; pressing enter runs the focused demo with
stdout captured and shows what it printed on the right.
"""

import logging
from typing import Callable, List, Optional

import urwid

from ..catalogue import CATEGORY_TITLES, DemoInfo, capture_demo_output, list_demos
from ..error_handler_util import ErrorHandlerUtil
from .. import __version__
from .key_bindings import KEY_CLEAR_OUTPUT, KEY_SELECT, QUIT_KEYS
from .logging_redirect import tui_logging

logger = logging.getLogger('GoFPatterns.TUI')
errors = ErrorHandlerUtil.create_error_context('TUI')

PALETTE = [
    ('body', 'default', 'default'),
    ('header', 'light cyan,bold', 'default'),
    ('footer', 'dark gray', 'default'),
    ('category', 'dark gray', 'default'),
    ('demo', 'default', 'default'),
    ('demo_focus', 'light cyan', 'default'),
    ('output', 'default', 'default'),
    ('error', 'light red', 'default'),
]

PLACEHOLDER_TEXT = "Select a demo and press enter to run it."
FOOTER_TEXT = "enter: run demo   →: scroll output   c: clear output   esc/q: quit"


class DemoListItem(urwid.WidgetWrap):
    """One selectable row in the demo list."""

    def __init__(self, demo: DemoInfo):
        self.demo = demo
        label = urwid.Text([
            ('category', f"{CATEGORY_TITLES[demo.category]:<11} "),
            demo.title,
        ], wrap='clip')
        super().__init__(urwid.AttrMap(label, 'demo', focus_map='demo_focus'))

    def selectable(self):
        return True

    def keypress(self, size, key):
        """Return key to parent for handling."""
        return key


class CatalogueBrowser:
    def __init__(self, demos: Optional[List[DemoInfo]] = None,
                 runner: Callable[[str], str] = capture_demo_output):
        self.demos = demos if demos is not None else list_demos()
        self.runner = runner
        self.loop = None

        self.demo_walker = urwid.SimpleFocusListWalker([DemoListItem(d) for d in self.demos])
        self.demo_list = urwid.ListBox(self.demo_walker)

        self.output = urwid.Text(PLACEHOLDER_TEXT)
        self.output_box = urwid.ListBox(urwid.SimpleFocusListWalker([self.output]))

        self.header = urwid.Text(f"GoF Patterns {__version__}")
        self.footer = urwid.Text(FOOTER_TEXT)

        body = urwid.Columns([
            ('weight', 1, urwid.LineBox(self.demo_list, title="Demos")),
            ('weight', 2, urwid.LineBox(urwid.AttrMap(self.output_box, 'output'), title="Output")),
        ])
        self.main_layout = urwid.Frame(
            header=urwid.AttrMap(self.header, 'header'),
            body=urwid.AttrMap(body, 'body'),
            footer=urwid.AttrMap(self.footer, 'footer')
        )

    def selected_demo(self) -> Optional[DemoInfo]:
        if not self.demos:
            return None
        return self.demo_list.focus.demo

    def run_selected(self) -> None:
        demo = self.selected_demo()
        if demo is None:
            return

        with tui_logging():
            logger.debug(f"Running demo {demo.name} from browser")
            try:
                text = self.runner(demo.name)
            except Exception as e:
                errors.log_and_continue(e, context=f"Demo '{demo.name}'")
                self.output.set_text(('error', f"{demo.title} failed: {e}"))
                return

        self.output.set_text(text.strip("\n") or f"{demo.title} printed nothing.")
        self.output_box.focus_position = 0

    def clear_output(self) -> None:
        self.output.set_text(PLACEHOLDER_TEXT)

    def unhandled_input(self, key):
        if key in QUIT_KEYS:
            raise urwid.ExitMainLoop()
        elif key == KEY_SELECT:
            self.run_selected()
        elif key == KEY_CLEAR_OUTPUT:
            self.clear_output()

    def run(self):
        self.loop = urwid.MainLoop(
            self.main_layout,
            PALETTE,
            unhandled_input=self.unhandled_input,
            handle_mouse=False
        )
        with tui_logging():
            self.loop.run()


def run_browser():
    CatalogueBrowser().run()
