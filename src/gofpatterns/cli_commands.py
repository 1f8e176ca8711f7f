"""Command-line interface commands and utilities for GoF Patterns."""

import argparse
import sys
import logging

from . import __version__
from .catalogue import (
    CATEGORIES, CATEGORY_TITLES,
    configure_logging, list_demos, run_all, run_category, run_demos,
)
from .error_handler_util import UnknownDemoError


def print_demo_list():
    """Print every demo grouped by category with its summary."""
    for category in CATEGORIES:
        print(f"{CATEGORY_TITLES[category]}:")
        for demo in list_demos(category):
            print(f"  {demo.name:<26} {demo.summary}")
        print()


def run_selected_demos(names):
    """Run the named demos in order; exit status 1 if any demo raised."""
    return 1 if run_demos(names) else 0


def build_parser():
    parser = argparse.ArgumentParser(
        prog='gofpatterns',
        description="GoF Patterns: runnable demos of design patterns and SOLID principles."
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--list', action='store_true', help='List all demos grouped by category.')
    parser.add_argument('--demo', action='append', metavar='NAME',
                        help='Run a single demo; repeat to run several in order.')
    parser.add_argument('--category', choices=CATEGORIES, type=str.lower,
                        help='Run every demo of one category.')
    parser.add_argument('--browse', action='store_true', help='Open the interactive catalogue browser.')
    parser.add_argument('--verbose', action='store_true', help='Show debug logging on the console.')
    return parser


def handle_cli_commands(argv=None):
    """Handle command-line arguments and execute CLI commands."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(level=logging.DEBUG if args.verbose else None)

    if args.list:
        print_demo_list()
        sys.exit(0)

    if args.browse:
        from .tui.catalogue_browser import run_browser
        run_browser()
        sys.exit(0)

    try:
        if args.demo:
            sys.exit(run_selected_demos(args.demo))
        if args.category:
            sys.exit(1 if run_category(args.category) else 0)
    except UnknownDemoError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(2)

    # No selection - run the full catalogue
    return args


def main(argv=None):
    """Main entry point for the application"""
    args = handle_cli_commands(argv)

    if args is None:
        return

    failed = run_all()
    sys.exit(1 if failed else 0)


if __name__ == '__main__':
    main()
