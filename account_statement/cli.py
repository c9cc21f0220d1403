"""
Command line access to the statement.

    account-statement list
    account-statement export --format csv --particulars alice --output-dir out/
    account-statement share --start-date 2024-01-01

Uses the same service and store as the HTTP API.
"""

import argparse
import sys

from pydantic import ValidationError as SchemaValidationError

from account_statement.config import get_settings
from account_statement.exceptions import LedgerError
from account_statement.logging_config import configure_logging
from account_statement.models.base import SessionLocal
from account_statement.schemas.statement import StatementFilter, StatementFormat
from account_statement.services.entry_service import EntryService
from account_statement.services.entry_store import SqlAlchemyEntryStore
from account_statement.services.export import FileSink, ShareLinkSink
from account_statement.services.formatter import format_statement


def _add_filter_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--particulars", default=None, help="case-insensitive text match")
    parser.add_argument("--start-date", default=None, help="YYYY-MM-DD, inclusive")
    parser.add_argument("--end-date", default=None, help="YYYY-MM-DD, inclusive")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="account-statement")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="print the full statement as text")

    export = sub.add_parser("export", help="write the statement to a file")
    _add_filter_args(export)
    export.add_argument(
        "--format",
        choices=[f.value for f in StatementFormat],
        default=StatementFormat.CSV.value,
    )
    export.add_argument("--output-dir", default=None)
    export.add_argument("--filename", default=None)

    share = sub.add_parser("share", help="print a share link for the statement")
    _add_filter_args(share)

    return parser


def run(args: argparse.Namespace, service: EntryService) -> str:
    """Execute a parsed command and return what should be printed."""
    settings = get_settings()

    if args.command == "list":
        return format_statement(
            service.list_entries(), StatementFormat.TEXT, service.date_format
        )

    criteria = StatementFilter(
        text_query=args.particulars,
        start_date=args.start_date,
        end_date=args.end_date,
    )

    if args.command == "export":
        target = StatementFormat(args.format)
        extension = "csv" if target is StatementFormat.CSV else "txt"
        filename = args.filename or f"account-statement.{extension}"
        sink = FileSink(args.output_dir or settings.EXPORT_DIR, filename)
        return sink.deliver(service.render_statement(criteria, target))

    return service.share_statement(criteria, ShareLinkSink(settings.SHARE_BASE_URL))


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    args = build_parser().parse_args(argv)

    db = SessionLocal()
    try:
        service = EntryService(
            SqlAlchemyEntryStore(db), date_format=settings.DATE_DISPLAY_FORMAT
        )
        print(run(args, service))
    except SchemaValidationError as e:
        print(f"Invalid filter: {e}", file=sys.stderr)
        return 2
    except LedgerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        db.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
