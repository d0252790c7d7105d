"""
SuggestBox - a search box with live topic and country filter suggestions.
"""

__version__ = "0.1.0"
