"""
Search Box Controller - wires the suggestion filter and focus navigator to user input.

Owns the query, the selection set, the navigator state and the deferred
blur close. The rendering layer feeds it input events and reads back
`view`, `cursor`, `is_open` and the selection to paint the dropdown.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

from .catalog import Catalog, Country
from .config import SuggestBoxSettings
from .focus_navigator import (
    Activation, Category, CategoryLengths, Cursor, NavigatorState,
    activate, category_lengths, category_ordering, close_dropdown,
    move_horizontal, move_vertical, open_dropdown, repair_cursor,
)
from .suggestion_filter import Candidates, derive_candidates

logger = logging.getLogger('SuggestBox.Controller')


@dataclass(frozen=True)
class SuggestionView:
    """Everything derived from (query, selection, catalog) for one render."""
    query: str
    candidates: Candidates
    popular_searches: Tuple[str, ...]
    lengths: CategoryLengths
    ordering: Tuple[Category, ...]

    def items(self, category: Category) -> Sequence:
        """Displayed items of a category, indexable by Cursor.index."""
        if category is Category.TOPIC:
            return self.candidates.displayed_topics
        if category is Category.COUNTRY:
            return self.candidates.displayed_countries
        if category is Category.SEARCH:
            return (self.query,) if self.query else ()
        return self.popular_searches if self.lengths[Category.POPULAR_SEARCH] else ()


class DeferredClose:
    """
    Cancellable timeout that closes the dropdown after a blur.

    Uses the urwid MainLoop alarm API (set_alarm_in / remove_alarm). With no
    loop, or a zero delay, the close runs immediately.
    """

    def __init__(self, delay: float, on_fire: Callable[[], None]):
        self.delay = delay
        self._on_fire = on_fire
        self._loop = None
        self._alarm = None

    @property
    def pending(self) -> bool:
        return self._alarm is not None

    def schedule(self, loop):
        """Schedule the close, replacing any close already pending."""
        self.cancel()
        if loop is None or self.delay <= 0:
            self._on_fire()
            return
        self._loop = loop
        self._alarm = loop.set_alarm_in(self.delay, self._fire)
        logger.debug(f"Blur close scheduled in {self.delay:.2f}s")

    def cancel(self):
        """Drop a pending close, if any."""
        if self._alarm is None:
            return
        self._loop.remove_alarm(self._alarm)
        self._alarm = None
        logger.debug("Pending blur close cancelled")

    def _fire(self, loop, _user_data):
        self._alarm = None
        self._on_fire()


class SearchBoxController:
    """
    State holder for one search box and its suggestion dropdown.

    Outbound collaborators:
        refresh_results(): called on submission when auto refresh is off, and
            on every query or selection change when it is on
        on_selection_changed(selected_topics, selected_countries): called
            after every toggle
    """

    def __init__(self, catalog: Catalog, settings: Optional[SuggestBoxSettings] = None,
                 refresh_results: Optional[Callable[[], None]] = None,
                 on_selection_changed: Optional[Callable[[tuple, tuple], None]] = None,
                 loop=None):
        self.catalog = catalog
        self.settings = settings or SuggestBoxSettings()
        self.refresh_results = refresh_results
        self.on_selection_changed = on_selection_changed
        self.loop = loop

        self.query = ""
        self.selected_topics: Tuple[str, ...] = ()
        self.selected_countries: Tuple[Country, ...] = ()
        self.input_focused = False
        self.state = NavigatorState()
        self.submitted_query: Optional[str] = None

        self._deferred_close = DeferredClose(self.settings.blur_grace_delay, self._close_after_blur)
        self._activation_handlers = {
            Category.TOPIC: self._activate_topic,
            Category.COUNTRY: self._activate_country,
            Category.SEARCH: self._activate_search,
            Category.POPULAR_SEARCH: self._activate_popular_search,
        }

    # Derived state

    @property
    def cursor(self) -> Optional[Cursor]:
        return self.state.cursor

    @property
    def is_open(self) -> bool:
        return self.state.open

    @property
    def has_selection(self) -> bool:
        return bool(self.selected_topics or self.selected_countries)

    @property
    def close_pending(self) -> bool:
        return self._deferred_close.pending

    @property
    def view(self) -> SuggestionView:
        """Recompute candidates, category lengths and ordering from current state."""
        candidates = derive_candidates(
            self.query,
            self.catalog.topics,
            self.catalog.countries,
            self.selected_topics,
            self.selected_countries,
        )
        lengths = category_lengths(
            candidates.displayed_topics,
            candidates.displayed_countries,
            self.query,
            self.catalog.popular_searches,
            self.has_selection,
        )
        return SuggestionView(
            query=self.query,
            candidates=candidates,
            popular_searches=self.catalog.popular_searches,
            lengths=lengths,
            ordering=category_ordering(lengths),
        )

    def _repair(self):
        self.state = repair_cursor(self.state, self.view.lengths)

    # Visibility

    def focus(self):
        """Input gained focus: cancel any pending blur close and open."""
        self.input_focused = True
        self._deferred_close.cancel()
        self.state = open_dropdown(self.state)
        self._repair()

    def blur(self):
        """Input lost focus: close after the grace delay unless focus comes back."""
        self.input_focused = False
        if self.is_open:
            self._deferred_close.schedule(self.loop)

    def dismiss(self):
        """Escape pressed."""
        self._close("dismissed")

    def click_away(self):
        """Pointer activity outside the search box and dropdown."""
        self.input_focused = False
        self._close("click-away")

    def _close_after_blur(self):
        if self.input_focused:
            return
        self._close("blur")

    def _close(self, reason: str):
        self._deferred_close.cancel()
        if self.is_open:
            logger.info(f"Closing dropdown ({reason})")
        self.state = close_dropdown(self.state)

    # Query and selection

    def _change_query(self, text: str) -> bool:
        if text == self.query:
            return False
        self.query = text
        return True

    def set_query(self, text: str):
        """Search box text changed."""
        if not self._change_query(text):
            return
        if text:
            self.state = open_dropdown(self.state)
        elif not self.input_focused:
            self._close("query cleared")
        self._repair()
        self._auto_refresh()

    def toggle_topic(self, topic: str):
        """Add the topic to the selection, or remove it if already selected."""
        if topic in self.selected_topics:
            self.selected_topics = tuple(t for t in self.selected_topics if t != topic)
        else:
            self.selected_topics = self.selected_topics + (topic,)
        self._selection_changed(f"topic '{topic}'")

    def toggle_country(self, country: Country):
        """Add the country to the selection, or remove it if already selected."""
        if country in self.selected_countries:
            self.selected_countries = tuple(c for c in self.selected_countries if c != country)
        else:
            self.selected_countries = self.selected_countries + (country,)
        self._selection_changed(f"country '{country.name}'")

    def _selection_changed(self, what: str):
        logger.info(f"Toggled {what}: {len(self.selected_topics)} topics, "
                    f"{len(self.selected_countries)} countries selected")
        self._change_query("")
        if self.on_selection_changed:
            self.on_selection_changed(self.selected_topics, self.selected_countries)
        self._repair()
        self._auto_refresh()

    def _auto_refresh(self):
        if self.settings.auto_refresh and self.refresh_results:
            self.refresh_results()

    # Submission

    def submit(self):
        """Submit the current query: close, and refresh results unless auto refresh handles it."""
        self._close("search submitted")
        self.submitted_query = self.query
        logger.info(f"🔍 Search submitted: '{self.query}'")
        if not self.settings.auto_refresh and self.refresh_results:
            self.refresh_results()

    def choose_popular_search(self, phrase: str):
        """Replace the query with a canned phrase and submit it."""
        if self._change_query(phrase):
            self._auto_refresh()
        self.submit()

    # Navigation

    def move_vertical(self, step: int):
        self.state = move_vertical(self.state, self.view.lengths, step)

    def move_horizontal(self, step: int):
        self.state = move_horizontal(self.state, self.view.lengths, step)

    def activate(self) -> Optional[Activation]:
        """
        Act on the focused item, or submit the query when nothing is focused.

        A closed dropdown with a non-empty query still submits, like pressing
        enter in a plain search form. A pending blur close is cancelled only
        when something is activated; otherwise it still fires.
        """
        view = self.view

        if not self.is_open:
            if not self.query:
                return None
            self.submit()
            return Activation(Category.SEARCH, 0)

        activation = activate(self.state, view.lengths, self.query)
        if activation is None:
            return None

        self._deferred_close.cancel()
        logger.debug(f"Activating {activation.category.value}[{activation.index}]")
        self._activation_handlers[activation.category](view, activation.index)
        return activation

    def _activate_topic(self, view: SuggestionView, index: int):
        self.toggle_topic(view.candidates.displayed_topics[index])
        self._close("topic selected")
        self.input_focused = True

    def _activate_country(self, view: SuggestionView, index: int):
        self.toggle_country(view.candidates.displayed_countries[index])
        self._close("country selected")
        self.input_focused = True

    def _activate_search(self, view: SuggestionView, index: int):
        self.submit()

    def _activate_popular_search(self, view: SuggestionView, index: int):
        self.choose_popular_search(view.popular_searches[index])
