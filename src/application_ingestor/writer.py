"""Transactional write of one application document."""

from __future__ import annotations

from typing import Any, Dict

from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError

from .errors import ConstraintError
from .ingest import ingest_application
from .loader import PathLike, load_application
from .logging_utils import get_logger
from .models import ImportSummary

logger = get_logger(__name__)


def write_application(engine: Engine, node: Dict[str, Any]) -> ImportSummary:
    """Insert everything for ``node`` in one transaction; commit only on success."""
    try:
        with engine.begin() as conn:
            summary = ingest_application(conn, node)
    except IntegrityError as exc:
        raise ConstraintError(f"Database rejected the import: {exc.orig}") from exc

    logger.info("Committed %s", summary.describe())
    return summary


def import_file(engine: Engine, path: PathLike) -> ImportSummary:
    node = load_application(path)
    return write_application(engine, node)
