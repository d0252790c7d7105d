"""
Focus Navigator - a single focus cursor over the dropdown's suggestion categories.

The navigable space is the ordered list of non-empty categories
(topics, countries, the "search for X" action, popular searches). Every
transition is a pure function over NavigatorState; the category lengths are
recomputed by the caller from the current suggestion lists and passed in.

After any transition the cursor is repaired against the current lengths:
a cursor whose category vanished becomes None, an index past the end is
clamped to the last item, and a closed dropdown never carries a cursor.
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, Optional, Sequence, Tuple

logger = logging.getLogger('SuggestBox.FocusNavigator')


class Category(Enum):
    """The four kinds of navigable suggestion groups."""
    TOPIC = 'topic'
    COUNTRY = 'country'
    SEARCH = 'search'
    POPULAR_SEARCH = 'popularSearch'


# Fixed priority order of categories in the dropdown
CATEGORY_PRIORITY = (Category.TOPIC, Category.COUNTRY, Category.SEARCH, Category.POPULAR_SEARCH)

# Only these categories have positions to move between horizontally
LATERAL_CATEGORIES = frozenset({Category.TOPIC, Category.COUNTRY})

# Step values for the move functions
UP = LEFT = -1
DOWN = RIGHT = 1

CategoryLengths = Dict[Category, int]


@dataclass(frozen=True)
class Cursor:
    """Focus position: a category and an index into its displayed list."""
    category: Category
    index: int


@dataclass(frozen=True)
class NavigatorState:
    """Dropdown visibility plus the (nullable) focus cursor."""
    cursor: Optional[Cursor] = None
    open: bool = False


@dataclass(frozen=True)
class Activation:
    """What an Activate command resolved to: the category and the item index."""
    category: Category
    index: int


_LENGTH_RULES = {
    Category.TOPIC: lambda topics, countries, query, popular, has_selection: len(topics),
    Category.COUNTRY: lambda topics, countries, query, popular, has_selection: len(countries),
    Category.SEARCH: lambda topics, countries, query, popular, has_selection: 1 if query else 0,
    Category.POPULAR_SEARCH: lambda topics, countries, query, popular, has_selection: (
        0 if query or has_selection else len(popular)
    ),
}


def category_lengths(
    displayed_topics: Sequence,
    displayed_countries: Sequence,
    query: str,
    popular_searches: Sequence[str],
    has_selection: bool,
) -> CategoryLengths:
    """
    Number of focusable items in each category.

    The search action exists only for a non-empty query; popular searches
    only when the query is empty and nothing is selected.
    """
    return {
        category: rule(displayed_topics, displayed_countries, query, popular_searches, has_selection)
        for category, rule in _LENGTH_RULES.items()
    }


def category_ordering(lengths: CategoryLengths) -> Tuple[Category, ...]:
    """Non-empty categories in priority order."""
    return tuple(category for category in CATEGORY_PRIORITY if lengths.get(category, 0) > 0)


def _clamp(index: int, length: int) -> int:
    return max(0, min(index, length - 1))


def repair_cursor(state: NavigatorState, lengths: CategoryLengths) -> NavigatorState:
    """Re-validate the cursor against the current category lengths."""
    if not state.open:
        return state if state.cursor is None else replace(state, cursor=None)

    cursor = state.cursor
    if cursor is None:
        return state

    length = lengths.get(cursor.category, 0)
    if length == 0:
        logger.debug(f"Cursor category '{cursor.category.value}' vanished, clearing cursor")
        return replace(state, cursor=None)

    index = _clamp(cursor.index, length)
    if index != cursor.index:
        logger.debug(f"Clamping cursor in '{cursor.category.value}' from {cursor.index} to {index}")
        return replace(state, cursor=Cursor(cursor.category, index))
    return state


def open_dropdown(state: NavigatorState) -> NavigatorState:
    """Focus gained or text typed: show the dropdown."""
    if state.open:
        return state
    logger.debug("Dropdown opened")
    return replace(state, open=True)


def close_dropdown(state: NavigatorState) -> NavigatorState:
    """Blur, dismissal, click-away or a completed action: hide and reset the cursor."""
    if state.open or state.cursor is not None:
        logger.debug("Dropdown closed")
    return NavigatorState(cursor=None, open=False)


def _step_category(ordering: Tuple[Category, ...], category: Category, step: int) -> Category:
    position = ordering.index(category)
    return ordering[(position + step) % len(ordering)]


def move_vertical(state: NavigatorState, lengths: CategoryLengths, step: int) -> NavigatorState:
    """
    Move the cursor to the next (DOWN) or previous (UP) non-empty category, wrapping.

    A None cursor lands on the first category for DOWN and the last for UP,
    at index 0. Otherwise the current index is kept and clamped to the new
    category's length so the cursor stays in roughly the same column.
    """
    state = repair_cursor(state, lengths)
    if not state.open:
        return state

    ordering = category_ordering(lengths)
    if not ordering:
        return state

    if state.cursor is None:
        target = ordering[0] if step > 0 else ordering[-1]
        new_cursor = Cursor(target, 0)
    else:
        target = _step_category(ordering, state.cursor.category, step)
        new_cursor = Cursor(target, _clamp(state.cursor.index, lengths[target]))

    logger.debug(f"Vertical move {step:+d}: {state.cursor} -> {new_cursor}")
    return replace(state, cursor=new_cursor)


def move_horizontal(state: NavigatorState, lengths: CategoryLengths, step: int) -> NavigatorState:
    """
    Move the cursor one item left or right within a topic or country row.

    Moves past either end are ignored rather than wrapped. The search action
    and popular searches have no lateral positions, so the move is ignored there.
    """
    state = repair_cursor(state, lengths)
    cursor = state.cursor
    if not state.open or cursor is None or cursor.category not in LATERAL_CATEGORIES:
        return state

    index = cursor.index + step
    if not 0 <= index < lengths[cursor.category]:
        return state

    return replace(state, cursor=Cursor(cursor.category, index))


def activate(state: NavigatorState, lengths: CategoryLengths, query: str) -> Optional[Activation]:
    """
    Resolve an Activate command to the item it targets.

    With no cursor and a non-empty query this is a plain submission, reported
    as the search action. Returns None when there is nothing to activate.
    """
    state = repair_cursor(state, lengths)
    if not state.open:
        return None
    if state.cursor is not None:
        return Activation(state.cursor.category, state.cursor.index)
    if query:
        return Activation(Category.SEARCH, 0)
    return None
