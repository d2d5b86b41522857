#!/usr/bin/env python3
"""Gallery CLI

Command-line utility to list the example charts, print their Vega-Lite
specifications, and display them in a browser.
"""

import argparse
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from vlplot.exceptions import VlplotError  # noqa: E402
from vlplot.gallery import get_example, list_examples_with_descriptions  # noqa: E402
from vlplot.logger import Logger, session_logger  # noqa: E402
from vlplot.themes import list_themes  # noqa: E402


def list_command(args) -> int:
    """List available examples"""
    for name, description in list_examples_with_descriptions().items():
        if args.verbose:
            print(f"{name:16} {description}")
        else:
            print(name)
    return 0


def print_command(args) -> int:
    """Print the specification of an example to stdout"""
    logger: Logger = session_logger
    try:
        chart = get_example(args.name).build()
        if args.theme:
            chart = chart.with_theme(args.theme)
    except VlplotError as e:
        logger.error("Failed to build example", example=args.name, error=e.message)
        return 1
    print(chart.to_string(indent=args.indent))
    return 0


def show_command(args) -> int:
    """Display an example in the browser"""
    logger: Logger = session_logger
    try:
        chart = get_example(args.name).build()
        path = chart.show(
            theme=args.theme,
            output_dir=args.output_dir,
            open_browser=False if args.no_browser else None,
        )
    except VlplotError as e:
        logger.error("Failed to show example", example=args.name, error=e.message)
        return 1
    print(path)
    return 0


def main():
    parser = argparse.ArgumentParser(
        description="vlplot Gallery - List, print and display example charts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python gallery.py list --verbose
  python gallery.py print stacked_bar --indent 2
  python gallery.py print choropleth --theme dark
  python gallery.py show stock_price
  python gallery.py show matrix_scatter --no-browser --output-dir /tmp/charts

Environment Variables:
    VLPLOT_OUTPUT_DIR     Directory for rendered pages (optional)
    VLPLOT_OPEN_BROWSER   Set to 0 to only write pages (optional)
    VLPLOT_THEME          Default theme for show (optional)
    VLPLOT_LOG_LEVEL      Logging verbosity (optional)
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    list_parser = subparsers.add_parser("list", help="List available examples")
    list_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show example descriptions",
    )

    print_parser = subparsers.add_parser("print", help="Print an example specification")
    print_parser.add_argument("name", help="Example name")
    print_parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="JSON indentation (default: compact)",
    )
    print_parser.add_argument(
        "--theme",
        choices=list_themes(),
        default=None,
        help="Theme to apply",
    )

    show_parser = subparsers.add_parser("show", help="Display an example in the browser")
    show_parser.add_argument("name", help="Example name")
    show_parser.add_argument(
        "--theme",
        choices=list_themes(),
        default=None,
        help="Theme to apply (default: VLPLOT_THEME env var)",
    )
    show_parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help="Directory for the rendered page (default: VLPLOT_OUTPUT_DIR or temp dir)",
    )
    show_parser.add_argument(
        "--no-browser",
        action="store_true",
        help="Only write the page, do not open a browser",
    )

    args = parser.parse_args()

    if args.command == "list":
        return list_command(args)
    elif args.command == "print":
        return print_command(args)
    elif args.command == "show":
        return show_command(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
