import urwid
import logging

from .config import SuggestBoxSettings
from .error_handler_util import ErrorHandlerUtil
from .focus_navigator import UP, DOWN, LEFT, RIGHT
from .search_box_controller import SearchBoxController
from .tui.widgets import (
    HelpDialog, WatermarkEdit, SuggestionPanel, SelectedFilters, StatusFooter
)
from .tui.key_bindings import *

logger = logging.getLogger('SuggestBox.TUI')
error_context = ErrorHandlerUtil.create_error_context('TUI')

PALETTE = [
    # Basic UI elements - use terminal defaults
    ('body', 'default', 'default'),
    ('footer', 'dark gray', 'default'),
    ('section_header', 'light green,bold', 'default'),

    # Input area
    ('input', 'white', 'default'),
    ('placeholder_text', 'dark gray', 'default'),
    ('search_status', 'dark gray', 'default'),

    # Suggestion chips and rows
    ('chip', 'default', 'dark gray'),
    ('selected_chip', 'white', 'dark blue'),
    ('focused_chip', 'black', 'light cyan'),
    ('focused_row', 'light cyan,bold', 'default'),
    ('search_row', 'default', 'default'),
    ('selected', 'default', 'default'),

    # Text colors
    ('light cyan', 'light cyan', 'default'),
    ('light magenta', 'light magenta', 'default'),
    ('dark cyan', 'dark cyan', 'default'),
    ('dark gray', 'dark gray', 'default'),
    ('dark green', 'dark green', 'default'),
    ('dark yellow', 'yellow', 'default'),
    ('bold', 'white,bold', 'default'),
]

NAVIGATION_STEPS = {
    KEY_NAVIGATE_UP: ('vertical', UP),
    KEY_NAVIGATE_DOWN: ('vertical', DOWN),
    KEY_NAVIGATE_LEFT: ('horizontal', LEFT),
    KEY_NAVIGATE_RIGHT: ('horizontal', RIGHT),
}


class SuggestBoxApp:
    """
    Terminal front end: a search input, the suggestion dropdown under it,
    the selected filter chips and a status footer.

    All behaviour lives in SearchBoxController; this class translates keys
    into controller commands and repaints from its state afterwards.
    """

    def __init__(self, catalog, settings=None, refresh_results=None, on_selection_changed=None):
        self.settings = settings or SuggestBoxSettings()
        self.host_refresh_results = refresh_results
        self.host_selection_changed = on_selection_changed
        self.refresh_count = 0
        self.loop = None
        self.help_overlay = None
        self._syncing_input = False

        self.controller = SearchBoxController(
            catalog,
            self.settings,
            refresh_results=self._on_refresh_results,
            on_selection_changed=self._on_selection_changed,
        )

        self.input_box = WatermarkEdit(
            caption="Search: ",
            edit_text="",
            watermark_text="Search for a topic or country... (^G for help)",
            lateral_passthrough=lambda: self.controller.cursor is not None,
        )
        self.focus_status = urwid.Text("", align='right')
        self.suggestion_panel = SuggestionPanel()
        self.selected_filters = SelectedFilters()
        self.footer = StatusFooter()
        self.footer.update(auto_refresh=self.settings.auto_refresh)

        input_area = urwid.Columns([
            ('weight', 1, urwid.AttrMap(self.input_box, 'input')),
            ('pack', urwid.AttrMap(self.focus_status, 'search_status'))
        ])

        body_content = urwid.Pile([
            ('pack', input_area),
            ('pack', self.suggestion_panel),
            ('pack', urwid.AttrMap(self.selected_filters, 'selected')),
            ('weight', 1, urwid.SolidFill(' ')),
        ])

        self.main_layout = urwid.Frame(
            body=urwid.AttrMap(body_content, 'body'),
            footer=urwid.AttrMap(self.footer, 'footer')
        )

        urwid.connect_signal(self.input_box, 'change', self.on_input_changed)

        # The search box has focus when the app starts
        self.controller.focus()
        self._sync_view()

    # Alarm interface used by the controller's deferred close

    def has_loop(self):
        return self.loop is not None

    def set_alarm_in(self, sec, callback, user_data=None):
        """Schedule on the urwid loop and repaint after the callback runs."""
        def fire(loop, data):
            callback(loop, data)
            self._sync_view()
        return self.loop.set_alarm_in(sec, fire, user_data)

    def remove_alarm(self, handle):
        if not self.has_loop():
            return False
        return self.loop.remove_alarm(handle)

    # Collaborator callbacks

    def _on_refresh_results(self):
        self.refresh_count += 1
        self.footer.update(refresh_count=self.refresh_count, last_search=self.controller.query)
        if self.host_refresh_results:
            error_context.handle_with_fallback(
                self.host_refresh_results, error_message="Host refresh_results failed"
            )

    def _on_selection_changed(self, selected_topics, selected_countries):
        self.footer.update(selected_count=len(selected_topics) + len(selected_countries))
        if self.host_selection_changed:
            error_context.handle_with_fallback(
                lambda: self.host_selection_changed(selected_topics, selected_countries),
                error_message="Host on_selection_changed failed"
            )

    # Input handling

    def on_input_changed(self, widget, new_text):
        if self._syncing_input:
            return
        logger.debug("Input changed: '%s' -> '%s'", self.controller.query, new_text)
        if not self.controller.input_focused:
            self.controller.focus()
        self.controller.set_query(new_text)
        self._sync_view()

    def unhandled_input(self, key):
        logger.debug(f"UNHANDLED_INPUT received key: '{key}'")

        if self.help_overlay is not None:
            if key in (KEY_DISMISS, KEY_HELP, 'close_help'):
                self._close_help_dialog()
            return

        if key == KEY_HELP:
            self._show_help_dialog()
            return

        if key in (KEY_DISMISS, 'escape'):
            if not self.controller.is_open:
                raise urwid.ExitMainLoop()
            self.controller.dismiss()

        elif key in NAVIGATION_STEPS:
            axis, step = NAVIGATION_STEPS[key]
            if axis == 'vertical':
                self.controller.move_vertical(step)
            else:
                self.controller.move_horizontal(step)

        elif key == KEY_ACTIVATE:
            self.controller.activate()

        elif key == KEY_SUBMIT:
            self.controller.submit()

        elif key == KEY_TOGGLE_FOCUS:
            if self.controller.input_focused:
                self.controller.blur()
            else:
                self.controller.focus()

        else:
            return

        self._sync_view()

    # Rendering

    def _sync_view(self):
        """Repaint every widget from the controller's current state."""
        controller = self.controller
        view = controller.view

        if self.input_box.edit_text != controller.query:
            self._syncing_input = True
            try:
                self.input_box.set_edit_text(controller.query)
                self.input_box.set_edit_pos(len(controller.query))
            finally:
                self._syncing_input = False

        self.suggestion_panel.update(
            view, controller.cursor, controller.is_open,
            controller.selected_topics, controller.selected_countries
        )
        self.selected_filters.update(controller.selected_topics, controller.selected_countries)

        if controller.close_pending:
            self.focus_status.set_text("closing…")
        elif controller.input_focused:
            self.focus_status.set_text("")
        else:
            self.focus_status.set_text("⇥ tab to focus")

        if self.has_loop():
            self.loop.draw_screen()

    def _show_help_dialog(self):
        """Show the help dialog as an overlay."""
        overlay = urwid.Overlay(
            HelpDialog(),
            self.main_layout,
            align='center',
            width=('relative', 80),
            valign='middle',
            height=('relative', 60)
        )
        self.help_overlay = overlay
        if self.loop:
            self.loop.widget = overlay

    def _close_help_dialog(self):
        """Close the help dialog and return to main view."""
        self.help_overlay = None
        if self.loop:
            self.loop.widget = self.main_layout

    def run(self):
        """Run the main loop; returns the controller so the caller can read the final state."""
        self.loop = urwid.MainLoop(
            self.main_layout,
            PALETTE,
            unhandled_input=self.unhandled_input,
            handle_mouse=False
        )
        self.controller.loop = self

        try:
            self.loop.run()
        except Exception as e:
            logger.error(f"TUI Error: {e}", exc_info=True)
            return None
        finally:
            self.controller.loop = None
            self.loop = None
        return self.controller


def run_ui(catalog, settings=None, refresh_results=None, on_selection_changed=None):
    return SuggestBoxApp(catalog, settings, refresh_results, on_selection_changed).run()
