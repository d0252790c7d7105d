"""
TUI components for SuggestBox.

- widgets/: the search input, suggestion dropdown, selected filter chips and help overlay
- key_bindings: keyboard map shared by the widgets and the app
"""
