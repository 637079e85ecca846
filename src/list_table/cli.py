"""Command-line entry point: render a markdown list table as HTML.

Usage:
    list-table table.md --header-rows 1 --header-columns 1 --caption "Q1 Revenue"
    list-table - --validation strict < table.md
"""

import argparse
import logging
import sys

from pydantic import ValidationError

from list_table.config import DEFAULT_VALIDATION, LOG_FORMAT, LOG_LEVEL, VALIDATION_MODES
from list_table.formatting import format_error_report, render_html
from list_table.pipeline import build_table
from list_table.reader import parse_list_markup
from list_table.schema import ErrorReport, TableOptions

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render a markdown bullet-list table as HTML")
    parser.add_argument("path", help="Markdown file containing the list table ('-' for stdin)")
    parser.add_argument("--header-rows", type=int, default=0, help="Rows rendered in <thead> (default: 0)")
    parser.add_argument("--header-columns", type=int, default=0, help="Leading columns rendered as row headers (default: 0)")
    parser.add_argument("--footer-rows", type=int, default=0, help="Rows rendered in <tfoot> (default: 0)")
    parser.add_argument("--caption", type=str, default=None, help="Table caption")
    parser.add_argument("--class-name", type=str, default="", help="CSS class for the <table> element")
    parser.add_argument("--validation", choices=VALIDATION_MODES, default=DEFAULT_VALIDATION, help=f"Validation mode (default: {DEFAULT_VALIDATION})")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Read, build and print one table.  Returns the process exit code."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

    if args.path == "-":
        text = sys.stdin.read()
    else:
        with open(args.path, "r", encoding="utf-8") as fopen:
            text = fopen.read()

    try:
        options = TableOptions(
            header_rows=args.header_rows,
            header_columns=args.header_columns,
            footer_rows=args.footer_rows,
            caption=args.caption,
            class_name=args.class_name,
            validation=args.validation,
        )
    except ValidationError as exc:
        parser.error(str(exc))

    result = build_table(parse_list_markup(text), options)

    if isinstance(result, ErrorReport):
        print(format_error_report(result), file=sys.stderr)
        return 1

    print(render_html(result))
    logger.info("Rendered %d rows from %s", len(result.rows), args.path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
