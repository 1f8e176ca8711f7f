"""
Logging redirection for TUI mode.

Console handlers on the GoFPatterns logger write to stderr, which urwid
owns while the browser is on screen. File handlers keep receiving records.
"""

import contextlib
import logging
from typing import List


class TUILogCapture:
    """Detaches console handlers from a logger until stopped."""

    def __init__(self, logger_name: str = 'GoFPatterns'):
        self.logger = logging.getLogger(logger_name)
        self.detached: List[logging.Handler] = []
        self.null_handler = logging.NullHandler()
        self.original_propagate = self.logger.propagate
        self.active = False

    @staticmethod
    def is_console_handler(handler: logging.Handler) -> bool:
        # FileHandler subclasses StreamHandler
        return isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler)

    def start_capture(self):
        if self.active:
            return
        self.active = True

        self.detached = [h for h in self.logger.handlers if self.is_console_handler(h)]
        for handler in self.detached:
            self.logger.removeHandler(handler)
        # no handlers at all would fall through to logging.lastResort on stderr
        self.logger.addHandler(self.null_handler)

        self.original_propagate = self.logger.propagate
        self.logger.propagate = False

    def stop_capture(self):
        if not self.active:
            return
        self.active = False

        self.logger.removeHandler(self.null_handler)
        for handler in self.detached:
            self.logger.addHandler(handler)
        self.detached = []
        self.logger.propagate = self.original_propagate


@contextlib.contextmanager
def tui_logging(logger_name: str = 'GoFPatterns'):
    """Keep console log output off the screen for the duration of the block."""
    capture = TUILogCapture(logger_name)
    capture.start_capture()
    try:
        yield capture
    finally:
        capture.stop_capture()
