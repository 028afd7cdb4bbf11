"""Registry of relation loaders, in the order they run after the application row."""

from __future__ import annotations

from typing import Any, Callable, Dict, Tuple

from sqlalchemy.engine import Connection

from ..schema import (application_assessors, application_member_states,
                      vehicles)
from .assessors import ASSESSOR_KEY, load_assessors
from .member_states import MEMBER_STATES_KEY, load_member_states
from .vehicles import VEHICLE_IDENTIFIER_KEY, load_vehicles

RelationLoader = Callable[[Connection, str, Dict[str, Any]], int]

RELATION_LOADERS: Tuple[Tuple[str, str, RelationLoader], ...] = (
    (ASSESSOR_KEY, application_assessors.name, load_assessors),
    (MEMBER_STATES_KEY, application_member_states.name, load_member_states),
    (VEHICLE_IDENTIFIER_KEY, vehicles.name, load_vehicles),
)
