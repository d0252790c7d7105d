"""
Reusable UI widgets for the SuggestBox TUI.
"""

from .help_dialog import HelpDialog
from .edit_widgets import WatermarkEdit
from .display import SuggestionPanel, SelectedFilters, build_panel_sections
from .footer import StatusFooter

__all__ = [
    'HelpDialog',
    'WatermarkEdit',
    'SuggestionPanel',
    'SelectedFilters',
    'build_panel_sections',
    'StatusFooter'
]
