"""Command-line interface commands and utilities for SuggestBox."""

import argparse
import sys
import logging

from . import __version__
from .catalog import CatalogError, load_catalog
from .config import get_settings
from .focus_navigator import Category
from .search_box_controller import SearchBoxController

logger = logging.getLogger('SuggestBox')


def configure_logging(log_file='debug.log'):
    """
    Send everything to a debug log file and only critical messages to the console.

    The console stays quiet so log output never draws over the TUI.
    """
    if getattr(logger, '_suggestbox_configured', False):
        return logger

    file_handler = logging.FileHandler(log_file)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(
        '%(asctime)s.%(msecs)03d - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.CRITICAL)
    console_handler.setFormatter(logging.Formatter('%(message)s'))

    logger.setLevel(logging.DEBUG)
    logger.addHandler(file_handler)
    logger.addHandler(console_handler)
    logger._suggestbox_configured = True
    return logger


def print_catalog_info(catalog, settings, detailed: bool = False):
    """Print a summary of the loaded catalog and active settings."""
    print(f"SuggestBox v{__version__} - Catalog")
    print("=" * 45)

    print("CATALOG:")
    print(f"  Source: {settings.catalog_path or 'built-in'}")
    print(f"  Topics: {len(catalog.topics)}")
    print(f"  Countries: {len(catalog.countries)}")
    print(f"  Popular searches: {len(catalog.popular_searches)}")

    print("\nSETTINGS:")
    print(f"  Auto refresh: {'on' if settings.auto_refresh else 'off'}")
    print(f"  Blur grace delay: {settings.blur_grace_delay * 1000:.0f}ms")

    if detailed:
        print("\nTOPICS:")
        for topic in catalog.topics:
            print(f"  {topic}")
        print("\nCOUNTRIES:")
        for country in catalog.countries:
            print(f"  {country.label}")
        print("\nPOPULAR SEARCHES:")
        for phrase in catalog.popular_searches:
            print(f"  {phrase}")


def print_suggestions(catalog, settings, query):
    """Print what the dropdown would show for a query typed into a focused search box."""
    controller = SearchBoxController(catalog, settings)
    controller.focus()
    controller.set_query(query)
    view = controller.view

    print(f"Suggestions for '{query}':")
    print(f"  Categories: {', '.join(category.value for category in view.ordering) or '(none)'}")
    print(f"  Topics: {', '.join(view.candidates.displayed_topics) or '(none)'}")
    countries = ', '.join(country.label for country in view.candidates.displayed_countries)
    print(f"  Countries: {countries or '(none)'}")
    if view.lengths[Category.SEARCH]:
        print(f'  Action: Search for "{query}"')
    for phrase in view.items(Category.POPULAR_SEARCH):
        print(f"  Popular: {phrase}")


def print_search_summary(controller):
    """Print the final search and filters after the TUI exits."""
    if controller.submitted_query is not None:
        print(f"Search: {controller.submitted_query}")
    if controller.selected_topics:
        print(f"Topics: {', '.join(controller.selected_topics)}")
    if controller.selected_countries:
        print(f"Countries: {', '.join(country.name for country in controller.selected_countries)}")


def build_parser():
    parser = argparse.ArgumentParser(description="SuggestBox: a search box with live topic and country filter suggestions.")
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--catalog', metavar='PATH', help='Load topics, countries and popular searches from a JSON file.')
    parser.add_argument('--auto-refresh', action='store_true', help='Refresh results on every query or filter change instead of on submit.')
    parser.add_argument('--grace-delay', type=float, metavar='SECONDS', help='Delay before the dropdown closes after the search box loses focus.')
    parser.add_argument('--info', action='store_true', help='Show the loaded catalog and settings.')
    parser.add_argument('--detailed', action='store_true', help='With --info, list every catalog entry.')
    parser.add_argument('--suggest', metavar='QUERY', help='Print the suggestions for QUERY and exit.')
    parser.add_argument('--log-file', default='debug.log', help='Where to write debug logs (default: debug.log).')
    return parser


def handle_cli_commands(argv=None):
    """
    Parse arguments and run non-interactive commands.

    Returns:
        (args, catalog, settings) for interactive mode, or None when a
        command was handled and the process should exit.
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.log_file)

    settings = get_settings()
    if args.catalog:
        settings.catalog_path = args.catalog
    if args.auto_refresh:
        settings.auto_refresh = True
    if args.grace_delay is not None:
        if args.grace_delay < 0:
            print("❌ --grace-delay must not be negative", file=sys.stderr)
            sys.exit(2)
        settings.blur_grace_delay = args.grace_delay

    try:
        catalog = load_catalog(settings.catalog_path)
    except CatalogError as e:
        print(f"❌ {e}", file=sys.stderr)
        sys.exit(1)

    if args.info:
        print_catalog_info(catalog, settings, detailed=args.detailed)
        return None
    if args.suggest is not None:
        print_suggestions(catalog, settings, args.suggest)
        return None

    return args, catalog, settings


def main(argv=None):
    """Main entry point for the application"""
    handled = handle_cli_commands(argv)
    if handled is None:
        return

    _args, catalog, settings = handled

    from .suggest_tui import run_ui
    controller = run_ui(catalog, settings)
    if controller is not None:
        print_search_summary(controller)


if __name__ == '__main__':
    main()
