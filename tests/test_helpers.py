#!/usr/bin/env python3
"""Test helper utilities for SuggestBox tests"""

from suggestbox.catalog import Catalog, Country

FRANCE = Country("France", "🇫🇷")
GERMANY = Country("Germany", "🇩🇪")
SPAIN = Country("Spain", "🇪🇸")
KENYA = Country("Kenya", "🇰🇪")

TEST_TOPICS = (
    "Health",
    "Trade",
    "Education",
    "Energy",
    "Transport",
    "Tracking",
    "Traffic",
    "Tractors",
    "Trains",
)

TEST_POPULAR_SEARCHES = ("Trade deals", "Health spending", "Energy prices")


def create_test_catalog(popular_searches=TEST_POPULAR_SEARCHES):
    """Catalog with enough 'tra' topics to hit the suggestion cap.

    Returns:
        Catalog: Small deterministic catalog
    """
    return Catalog(
        topics=TEST_TOPICS,
        countries=(FRANCE, GERMANY, SPAIN, KENYA),
        popular_searches=tuple(popular_searches),
    )


def create_minimal_catalog(popular_searches=("Trade deals",)):
    """Two topics and one country."""
    return Catalog(
        topics=("Health", "Trade"),
        countries=(FRANCE,),
        popular_searches=tuple(popular_searches),
    )


class FakeLoop:
    """Stand-in for urwid.MainLoop's alarm API. Alarms fire only when told to."""

    def __init__(self):
        self.alarms = {}
        self.widget = None
        self.draw_count = 0
        self._next_handle = 0

    def set_alarm_in(self, sec, callback, user_data=None):
        self._next_handle += 1
        self.alarms[self._next_handle] = (sec, callback, user_data)
        return self._next_handle

    def remove_alarm(self, handle):
        return self.alarms.pop(handle, None) is not None

    def fire_all(self):
        pending = list(self.alarms.values())
        self.alarms.clear()
        for _sec, callback, user_data in pending:
            callback(self, user_data)

    def draw_screen(self):
        self.draw_count += 1
