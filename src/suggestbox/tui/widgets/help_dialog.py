"""
Help dialog widget for the SuggestBox TUI.
"""

import urwid
from ..key_bindings import KEY_HELP, KEY_DISMISS


class HelpDialog(urwid.WidgetWrap):
    """Help dialog listing the keyboard shortcuts."""

    def __init__(self):
        help_text = [
            ('bold', 'Suggestions:\n'),
            ('bold', '• ↑ / ↓: '), 'Move between topics, countries, search and popular searches\n',
            ('bold', '• ← / →: '), 'Move along a row of topic or country chips\n',
            ('bold', '• Enter: '), 'Select the focused chip, or run the focused search\n',
            ('bold', '• Esc: '), 'Close the suggestions (quit when already closed)\n\n',

            ('bold', 'Search box:\n'),
            ('bold', '• Tab: '), 'Leave the search box and come back\n',
            ('bold', '• ^R: '), 'Search for the current text\n\n',

            ('dark gray', 'Filters need at least two characters to match.\n'),
            ('dark gray', 'Selected filters stay pinned at the front of each row.\n\n'),
            ('dark gray', 'Press ^G or ESC to close')
        ]

        content = urwid.Text(help_text)
        padded = urwid.Padding(content, left=2, right=2)
        filled = urwid.Filler(padded, valign='top', top=1)

        box = urwid.LineBox(filled, title='Help')
        super().__init__(box)

    def keypress(self, size, key):
        if key in (KEY_DISMISS, KEY_HELP):
            return 'close_help'
        return super().keypress(size, key)
