"""
GoF Patterns: a runnable catalogue of Gang-of-Four design patterns and
SOLID principle illustrations.

Each demo lives in its own module and exposes a ``run()`` function that
prints the walkthrough to standard output. The catalogue module wires
them into an ordered registry used by the CLI and the TUI browser.
"""

__version__ = "0.3.0"
