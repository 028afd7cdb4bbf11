from __future__ import annotations

from pathlib import Path

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import ArgumentError, SQLAlchemyError

from .errors import DatabaseConnectionError
from .logging_utils import get_logger

LOGGER = get_logger("db")

_POSTGRES_SCHEMES = ("postgresql://", "postgres://")


def database_url(target: str) -> str:
    """Turn the CLI database argument into a SQLAlchemy URL."""
    if "://" not in target:
        return f"sqlite:///{Path(target).expanduser()}"
    for scheme in _POSTGRES_SCHEMES:
        if target.startswith(scheme):
            return "postgresql+psycopg://" + target[len(scheme):]
    return target


def _sqlite_file(url: str) -> Path | None:
    parsed = make_url(url)
    if parsed.get_backend_name() != "sqlite":
        return None
    if not parsed.database or parsed.database == ":memory:":
        return None
    return Path(parsed.database)


def connect(target: str, *, create: bool = False, echo: bool = False) -> Engine:
    """
    Create an engine for ``target`` and verify the database answers.

    A SQLite file that does not exist is treated as unreachable unless
    ``create`` is set, since SQLite would otherwise silently create an
    empty database without the expected tables.
    """
    url = database_url(target)
    sqlite_path = _sqlite_file(url)
    if sqlite_path is not None and not create and not sqlite_path.exists():
        raise DatabaseConnectionError(f"Database file not found: {sqlite_path}")

    try:
        engine = create_engine(url, echo=echo)
    except (ArgumentError, ImportError) as exc:
        raise DatabaseConnectionError(f"Unsupported database target {target!r}: {exc}") from exc

    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        engine.dispose()
        raise DatabaseConnectionError(f"Could not connect to database: {exc}") from exc

    LOGGER.info("Connected to %s", engine.url.render_as_string(hide_password=True))
    return engine
