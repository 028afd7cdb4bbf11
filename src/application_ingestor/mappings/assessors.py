"""Assessor lookup-or-create and the ``ApplicationAssessors`` link rows."""

from __future__ import annotations

from typing import Any, Dict, Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.engine import Connection

from ..errors import ConstraintError
from ..logging_utils import get_logger
from ..schema import application_assessors, assessors
from .common import string_list

logger = get_logger(__name__)

ASSESSOR_KEY = "assessor"

_ON_CONFLICT_INSERTS = {
    "postgresql": pg_insert,
    "sqlite": sqlite_insert,
}


def _lookup_assessor(conn: Connection, name: str) -> Optional[int]:
    return conn.execute(
        select(assessors.c.assessor_id).where(assessors.c.name == name)
    ).scalar_one_or_none()


def _insert_assessor(conn: Connection, name: str) -> Optional[int]:
    dialect_insert = _ON_CONFLICT_INSERTS.get(conn.dialect.name)
    if dialect_insert is None:
        result = conn.execute(assessors.insert().values(name=name))
        return result.inserted_primary_key[0]

    stmt = (
        dialect_insert(assessors)
        .values(name=name)
        .on_conflict_do_nothing(index_elements=[assessors.c.name])
        .returning(assessors.c.assessor_id)
    )
    return conn.execute(stmt).scalar_one_or_none()


def find_or_create_assessor(conn: Connection, name: str) -> int:
    existing = _lookup_assessor(conn, name)
    if existing is not None:
        logger.debug("Reusing assessor %r (id=%s)", name, existing)
        return existing

    created = _insert_assessor(conn, name)
    if created is not None:
        logger.debug("Created assessor %r (id=%s)", name, created)
        return created

    # Another writer inserted the same name between our select and insert.
    existing = _lookup_assessor(conn, name)
    if existing is None:
        raise ConstraintError(f"Could not create assessor: {name}")
    return existing


def load_assessors(conn: Connection, application_id: str, node: Dict[str, Any]) -> int:
    names = string_list(node, ASSESSOR_KEY)
    rows = [
        {
            "application_id": application_id,
            "assessor_id": find_or_create_assessor(conn, name),
        }
        for name in names
    ]
    if rows:
        conn.execute(application_assessors.insert(), rows)
    return len(rows)
