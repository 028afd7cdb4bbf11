"""Import one application JSON document into a relational database."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from rich.console import Console

from .config import Settings
from .db_connector import connect
from .errors import (ConstraintError, DatabaseConnectionError, FormatError,
                     LoadError, MissingFieldError, ShapeError)
from .logging_utils import get_logger, setup_logging
from .schema_init import apply_schema
from .writer import import_file

console = Console()
LOGGER = get_logger("cli")

SUCCESS_MESSAGE = "Import completed successfully."

EXIT_CONFIG = 1
EXIT_INPUT = 2
EXIT_WRITE = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="application-ingestor",
        description=__doc__,
    )
    parser.add_argument(
        "database",
        help="Path to a SQLite database file, or a SQLAlchemy database URL",
    )
    parser.add_argument("json_file", help="Path to the application JSON document")
    parser.add_argument(
        "--create-schema",
        action="store_true",
        help="Create the import tables first if they do not exist",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    settings = Settings.from_env().with_overrides(apply_schema=args.create_schema)
    setup_logging(settings.log_level)

    try:
        engine = connect(args.database, create=settings.apply_schema, echo=settings.echo_sql)
    except DatabaseConnectionError as exc:
        LOGGER.error("Connection error: %s", exc)
        print(f"Connection error: {exc}", file=sys.stderr)
        sys.exit(EXIT_CONFIG)

    try:
        if settings.apply_schema:
            apply_schema(engine)
        with console.status(f"Importing {args.json_file}..."):
            summary = import_file(engine, args.json_file)
    except (LoadError, ShapeError, MissingFieldError, FormatError) as exc:
        LOGGER.exception("Invalid input document")
        print(f"Input error: {exc}", file=sys.stderr)
        sys.exit(EXIT_INPUT)
    except ConstraintError as exc:
        LOGGER.exception("Database rejected the import")
        print(f"Constraint error: {exc}", file=sys.stderr)
        sys.exit(EXIT_WRITE)
    except Exception as exc:  # pragma: no cover - guard for CLI usage
        LOGGER.exception("Import failed")
        print(f"Import failed: {exc}", file=sys.stderr)
        sys.exit(EXIT_WRITE)
    finally:
        engine.dispose()

    LOGGER.info("Imported %s rows for %s", summary.total_rows, summary.application_id)
    console.print(SUCCESS_MESSAGE, markup=False, highlight=False)


if __name__ == "__main__":
    main()
