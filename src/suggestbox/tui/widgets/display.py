"""
Display widgets for the SuggestBox TUI: the suggestion dropdown and selected filter chips.
"""

import urwid
import logging

from ...focus_navigator import Category

logger = logging.getLogger('SuggestBox.TUI')

SECTION_TITLES = {
    Category.TOPIC: "Filter by topic",
    Category.COUNTRY: "Filter by country",
    Category.POPULAR_SEARCH: "Popular searches",
}


def _label(item):
    return getattr(item, 'label', item)


def _chip(label, focused, selected):
    if focused:
        attr = 'focused_chip'
    elif selected:
        attr = 'selected_chip'
    else:
        attr = 'chip'
    return (attr, f" {label} ")


def build_panel_sections(view, cursor, selected_topics=(), selected_countries=()):
    """
    Build the dropdown content as a list of urwid text markups, one per row.

    Categories appear in the view's ordering. Chip rows for topics and
    countries are laid out horizontally; popular searches one per row.
    """
    rows = []

    def is_focused(category, index):
        return cursor is not None and cursor.category is category and cursor.index == index

    for category in view.ordering:
        items = view.items(category)

        if category in (Category.TOPIC, Category.COUNTRY):
            selected = selected_topics if category is Category.TOPIC else selected_countries
            rows.append(('section_header', SECTION_TITLES[category]))
            chips = []
            for index, item in enumerate(items):
                if chips:
                    chips.append(' ')
                chips.append(_chip(_label(item), is_focused(category, index), item in selected))
            rows.append(chips)

        elif category is Category.SEARCH:
            focused = is_focused(category, 0)
            rows.append([
                ('light cyan', "▶ ") if focused else ('dark gray', "  "),
                ('focused_row' if focused else 'search_row', f'🔎 Search for "{view.query}"'),
            ])

        elif category is Category.POPULAR_SEARCH:
            rows.append(('section_header', SECTION_TITLES[category]))
            for index, phrase in enumerate(items):
                focused = is_focused(category, index)
                rows.append([
                    ('light cyan', "▶ ") if focused else ('dark gray', "  "),
                    ('focused_row' if focused else 'default', phrase),
                ])

    return rows


class SuggestionPanel(urwid.WidgetWrap):
    """Dropdown below the search box; empty while closed."""

    def __init__(self):
        self._pile = urwid.Pile([urwid.Text("")])
        self._box = urwid.LineBox(self._pile, title='Suggestions')
        self._hidden = urwid.Text("")
        super().__init__(self._hidden)
        self.visible = False

    def update(self, view, cursor, is_open, selected_topics=(), selected_countries=()):
        """Rebuild the rows from the current view and cursor."""
        self.visible = is_open and bool(view.ordering)
        if not self.visible:
            self._w = self._hidden
            return

        rows = build_panel_sections(view, cursor, selected_topics, selected_countries)
        self._pile.contents[:] = [(urwid.Text(row), self._pile.options()) for row in rows]
        self._w = self._box
        logger.debug(f"SuggestionPanel: {len(rows)} rows, cursor={cursor}")

    def selectable(self):
        # Keys stay with the search input; the panel is driven by the controller
        return False


class SelectedFilters(urwid.Text):
    """Chips for the pinned selection, shown under the search box."""

    def __init__(self):
        super().__init__("")

    def update(self, selected_topics, selected_countries):
        chips = []
        for item in list(selected_topics) + list(selected_countries):
            if chips:
                chips.append(' ')
            chips.append(('selected_chip', f" {_label(item)} ✕ "))
        self.set_text(chips if chips else "")
