"""
Key binding constants for the SuggestBox TUI.
Centralized location for all keyboard shortcuts.
"""

# Dropdown navigation
KEY_NAVIGATE_UP = 'up'
KEY_NAVIGATE_DOWN = 'down'
KEY_NAVIGATE_LEFT = 'left'
KEY_NAVIGATE_RIGHT = 'right'
KEY_ACTIVATE = 'enter'

# Visibility
KEY_DISMISS = 'esc'
KEY_TOGGLE_FOCUS = 'tab'  # Moves focus off the search box and back

# Search and help
KEY_SUBMIT = 'ctrl r'
KEY_HELP = 'ctrl g'

# Vertical keys always leave the search input
VERTICAL_KEYS = (KEY_NAVIGATE_UP, KEY_NAVIGATE_DOWN)

# Horizontal keys leave the search input only while a suggestion is focused
LATERAL_KEYS = (KEY_NAVIGATE_LEFT, KEY_NAVIGATE_RIGHT)

# Keys the search input always passes to the app
INPUT_PASSTHROUGH_KEYS = VERTICAL_KEYS + (KEY_DISMISS, 'escape', KEY_TOGGLE_FOCUS, KEY_SUBMIT, KEY_HELP)
