"""
Suggestion Filter - derives the topic and country candidates shown in the dropdown.

Pure functions only: given the same query, catalog and selection they always
return the same lists, so they are safe to call on every keystroke.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Sequence, Tuple, TypeVar

from .catalog import Country
from .config import MIN_QUERY_LENGTH, MAX_SUGGESTIONS

logger = logging.getLogger('SuggestBox.SuggestionFilter')

T = TypeVar('T')


@dataclass(frozen=True)
class Candidates:
    """Displayed candidate lists: selected items first, then capped matches."""
    displayed_topics: Tuple[str, ...]
    displayed_countries: Tuple[Country, ...]


def matches_query(query: str, label: str) -> bool:
    """Case-insensitive substring match; queries below MIN_QUERY_LENGTH never match."""
    if len(query) < MIN_QUERY_LENGTH:
        return False
    return query.lower() in label.lower()


def _pin_and_filter(
    query: str,
    catalog_items: Sequence[T],
    selected_items: Sequence[T],
    label_of: Callable[[T], str],
    limit: int,
) -> Tuple[T, ...]:
    pinned = list(selected_items)
    selected = set(selected_items)
    matches = [
        item for item in catalog_items
        if item not in selected and matches_query(query, label_of(item))
    ]
    return tuple(pinned + matches[:limit])


def derive_candidates(
    query: str,
    catalog_topics: Sequence[str],
    catalog_countries: Sequence[Country],
    selected_topics: Sequence[str],
    selected_countries: Sequence[Country],
    limit: int = MAX_SUGGESTIONS,
) -> Candidates:
    """
    Derive the displayed topic and country lists for a query.

    Selected items are pinned: they always come first, in selection order,
    whether or not they match the query. At most `limit` non-selected
    matches follow, in catalog order.

    Args:
        query: Literal search box content
        catalog_topics: All topics, in catalog order
        catalog_countries: All countries, in catalog order
        selected_topics: Currently selected topics, in selection order
        selected_countries: Currently selected countries, in selection order
        limit: Cap on non-selected matches per category

    Returns:
        Candidates with displayed_topics and displayed_countries
    """
    topics = _pin_and_filter(query, catalog_topics, selected_topics, lambda topic: topic, limit)
    countries = _pin_and_filter(
        query, catalog_countries, selected_countries, lambda country: country.name, limit
    )
    logger.debug(f"Candidates for '{query}': {len(topics)} topics, {len(countries)} countries")
    return Candidates(topics, countries)
