"""
Custom edit widgets for the SuggestBox TUI.
"""

import urwid
import logging

from ..key_bindings import INPUT_PASSTHROUGH_KEYS, LATERAL_KEYS

logger = logging.getLogger('SuggestBox.TUI')


class WatermarkEdit(urwid.Edit):
    """
    Search input with watermark text when empty.

    Navigation and control keys are returned unhandled so the app sees them.
    Left/right move the caret, unless lateral_passthrough() says a suggestion
    is focused, in which case they go to the app as well.
    """

    def __init__(self, caption="", edit_text="", watermark_text="", lateral_passthrough=None, **kwargs):
        super().__init__(caption, edit_text, **kwargs)
        self.watermark_text = watermark_text
        self.lateral_passthrough = lateral_passthrough
        self._has_been_edited = False

    def render(self, size, focus=False):
        """Override render to show watermark when empty."""
        if not self.edit_text and not self._has_been_edited and self.watermark_text:
            full_watermark = f"{self.caption}{self.watermark_text}"
            watermark_widget = urwid.Text([('placeholder_text', full_watermark)], align='left')
            return watermark_widget.render(size, focus)
        return super().render(size, focus)

    def keypress(self, size, key):
        """Track edits to hide the watermark and hand control keys to the parent."""
        if key in INPUT_PASSTHROUGH_KEYS:
            return key
        if key in LATERAL_KEYS and self.lateral_passthrough and self.lateral_passthrough():
            logger.debug(f"WatermarkEdit: passing '{key}' to suggestion navigation")
            return key

        # Mark as edited when user starts typing
        if key and len(key) == 1 and key.isprintable():
            self._has_been_edited = True
        elif key == 'backspace' and self.edit_text:
            self._has_been_edited = True

        return super().keypress(size, key)
