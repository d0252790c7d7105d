"""
Footer widgets for the SuggestBox TUI.

StatusFooter lives with the centralized StatusDisplayManager.
"""

from suggestbox.status_display_manager import StatusFooter

__all__ = ['StatusFooter']
