"""Mapping helpers for ``Vehicles`` rows derived from a comma-delimited field."""

from __future__ import annotations

from typing import Any, Dict, List

from sqlalchemy.engine import Connection

from ..logging_utils import get_logger
from ..schema import vehicles
from .common import required_text

logger = get_logger(__name__)

VEHICLE_IDENTIFIER_KEY = "vehicleIdentifier"
VEHICLE_SEPARATOR = ","


def split_vehicle_identifiers(raw: str) -> List[str]:
    """Split on commas and trim each token; empty tokens are dropped."""
    tokens = [token.strip() for token in raw.split(VEHICLE_SEPARATOR)]
    kept = [token for token in tokens if token]
    if len(kept) != len(tokens) and raw.strip():
        logger.warning(
            "Dropped %s empty vehicle identifier(s) from %r",
            len(tokens) - len(kept),
            raw,
        )
    return kept


def load_vehicles(conn: Connection, application_id: str, node: Dict[str, Any]) -> int:
    identifiers = split_vehicle_identifiers(required_text(node, VEHICLE_IDENTIFIER_KEY))
    rows = [
        {"application_id": application_id, "identifier": identifier}
        for identifier in identifiers
    ]
    if rows:
        conn.execute(vehicles.insert(), rows)
    return len(rows)
