"""Mapping helpers for the ``ApplicationMemberStates`` link rows."""

from __future__ import annotations

from typing import Any, Dict

from sqlalchemy.engine import Connection

from ..schema import application_member_states
from .common import string_list

MEMBER_STATES_KEY = "memberStates"


def load_member_states(conn: Connection, application_id: str, node: Dict[str, Any]) -> int:
    rows = [
        {"application_id": application_id, "state_code": state}
        for state in string_list(node, MEMBER_STATES_KEY)
    ]
    if rows:
        conn.execute(application_member_states.insert(), rows)
    return len(rows)
