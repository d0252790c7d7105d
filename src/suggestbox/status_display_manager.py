"""
Status Display Manager - tracks status information and formats the footer.
"""

import urwid
from suggestbox import __version__
from suggestbox.tui.key_bindings import KEY_HELP, KEY_SUBMIT


def _key_label(key: str) -> str:
    if key.startswith('ctrl '):
        return '^' + key[len('ctrl '):].upper()
    return key.upper()


class StatusInfo:
    """Data class to hold status information."""

    def __init__(self):
        self.selected_count = 0
        self.refresh_count = 0
        self.auto_refresh = False
        self.last_search = ""

    def update(self, **kwargs):
        """Update status fields from keyword arguments."""
        for key, value in kwargs.items():
            if hasattr(self, key) and value is not None:
                setattr(self, key, value)


class StatusDisplayManager:
    """Manages status information display and footer formatting."""

    def __init__(self):
        self.status_info = StatusInfo()
        self._left_text_widget = None
        self._right_text_widget = None

    def update_status(self, **kwargs):
        """Update status information."""
        self.status_info.update(**kwargs)
        self._refresh_display()

    def get_status_info(self) -> StatusInfo:
        return self.status_info

    def create_footer_widget(self) -> urwid.Widget:
        """Create the footer widget with current status."""
        self._left_text_widget = urwid.Text("")
        self._right_text_widget = urwid.Text("", align='right')

        footer_columns = urwid.Columns([self._left_text_widget, self._right_text_widget])
        self._refresh_display()
        return urwid.AttrMap(footer_columns, 'footer')

    def _refresh_display(self):
        """Refresh the footer display with current status."""
        if self._left_text_widget is None:
            return
        self._left_text_widget.set_text(self._generate_status_text())
        self._right_text_widget.set_text(self._generate_key_bindings())

    def _generate_status_text(self) -> list:
        info = self.status_info
        left_text = [('bold', ('dark cyan', f"SuggestBox v{__version__}"))]

        if info.selected_count > 0:
            noun = "filter" if info.selected_count == 1 else "filters"
            left_text.append(('dark gray', f" • {info.selected_count} {noun}"))

        if info.refresh_count > 0:
            left_text.append(('dark green', f" • refreshed {info.refresh_count}x"))

        if info.last_search:
            left_text.append(('dark yellow', f" • last: '{info.last_search}'"))

        if info.auto_refresh:
            left_text.append(('light magenta', " • auto-refresh"))

        return left_text

    def _generate_key_bindings(self) -> list:
        """Generate key binding text for footer."""
        return [
            ('bold', _key_label(KEY_HELP)), ('dark gray', " help "),
            ('bold', "↑↓←→"), ('dark gray', " navigate "),
            ('bold', "ENTER"), ('dark gray', " select "),
            ('bold', _key_label(KEY_SUBMIT)), ('dark gray', " search "),
            ('bold', "ESC"), ('dark gray', " close"),
        ]


class StatusFooter(urwid.WidgetWrap):
    """Footer widget that delegates to StatusDisplayManager."""

    def __init__(self):
        self._display_manager = StatusDisplayManager()
        footer_widget = self._display_manager.create_footer_widget()
        super().__init__(footer_widget.original_widget)

    @property
    def status_info(self) -> StatusInfo:
        return self._display_manager.get_status_info()

    def update(self, selected_count=None, refresh_count=None, auto_refresh=None, last_search=None):
        """Update footer with new status information."""
        self._display_manager.update_status(
            selected_count=selected_count,
            refresh_count=refresh_count,
            auto_refresh=auto_refresh,
            last_search=last_search,
        )
