"""
Utilities to bootstrap the import target schema.

The tables are only created when the sentinel table is missing; existing
tables are never altered.
"""

from __future__ import annotations

from sqlalchemy import inspect
from sqlalchemy.engine import Engine

from .logging_utils import get_logger
from .schema import applications, metadata

logger = get_logger(__name__)


def schema_exists(engine: Engine, table: str = applications.name) -> bool:
    """Return True if the sentinel table already exists."""
    return inspect(engine).has_table(table)


def apply_schema(engine: Engine) -> bool:
    """
    Create the import tables on ``engine``.

    Returns True if the schema was applied, False if it already existed.
    """
    if schema_exists(engine):
        logger.debug("Schema already present, skipping creation")
        return False

    metadata.create_all(engine)
    logger.info("Created tables: %s", ", ".join(metadata.tables))
    return True
