"""Orchestrates mapping the application node into the relational schema."""

from __future__ import annotations

from typing import Any, Dict

from sqlalchemy.engine import Connection

from .logging_utils import get_logger
from .mappings.application import insert_application, map_application
from .mappings.registry import RELATION_LOADERS
from .models import ImportSummary
from .schema import applications

logger = get_logger(__name__)


def ingest_application(conn: Connection, node: Dict[str, Any]) -> ImportSummary:
    """
    Stage every row for one application on ``conn``.

    Relation fields are read only when their loader runs, so a malformed
    ``memberStates`` is reported after the application and assessor rows
    were already executed. The caller's transaction keeps that atomic.
    """
    record = map_application(node)
    application_id = insert_application(conn, record)
    summary = ImportSummary(application_id=application_id, rows={applications.name: 1})

    for key, table_name, loader in RELATION_LOADERS:
        count = loader(conn, application_id, node)
        logger.debug("%s: staged %s row(s) into %s", key, count, table_name)
        summary.rows[table_name] = count

    return summary
