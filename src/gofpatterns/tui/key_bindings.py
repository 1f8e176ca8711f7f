"""
Key binding constants for the GoF Patterns TUI.
Centralized location for all keyboard shortcuts.
"""

# Selection
KEY_QUIT = 'esc'
KEY_QUIT_ALT = 'q'
KEY_SELECT = 'enter'

# Output pane
KEY_CLEAR_OUTPUT = 'c'

QUIT_KEYS = (KEY_QUIT, KEY_QUIT_ALT, 'Q')
