from __future__ import annotations

from typing import Dict

from sqlalchemy import func, select
from sqlalchemy.engine import Engine

from application_ingestor.schema import ALL_TABLES


def count_rows(engine: Engine) -> Dict[str, int]:
    """Row count per import table, keyed by table name."""
    with engine.connect() as conn:
        return {
            table.name: conn.execute(select(func.count()).select_from(table)).scalar_one()
            for table in ALL_TABLES
        }


def empty_counts() -> Dict[str, int]:
    return {table.name: 0 for table in ALL_TABLES}
