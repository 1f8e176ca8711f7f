"""
TUI components for GoF Patterns.

- key_bindings: keyboard shortcut constants
- catalogue_browser: urwid browser listing demos and showing their output
"""
