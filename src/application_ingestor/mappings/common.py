"""Shared utilities for mapping the application node into relational rows."""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..errors import MissingFieldError, ShapeError

TIMESTAMP_RE = re.compile(
    r"^(?P<year>\d{4})-(?P<month>\d{1,2})-(?P<day>\d{1,2})"
    r" (?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})"
    r"(?:\.(?P<fraction>\d{1,9}))?$"
)


def parse_timestamp(value: Any) -> datetime:
    """
    Parse ``YYYY-MM-DD HH:MM:SS[.fraction]`` into a naive datetime.

    The format is fixed and locale independent; surrounding whitespace is
    ignored. Fractions longer than six digits are truncated to
    microseconds. Raises ``ValueError`` otherwise.
    """
    if not isinstance(value, str):
        raise ValueError("timestamp must be a string")
    match = TIMESTAMP_RE.fullmatch(value.strip())
    if match is None:
        raise ValueError("expected 'YYYY-MM-DD HH:MM:SS[.fraction]'")

    fraction = match.group("fraction") or ""
    microsecond = int(fraction[:6].ljust(6, "0")) if fraction else 0
    return datetime(
        int(match.group("year")),
        int(match.group("month")),
        int(match.group("day")),
        int(match.group("hour")),
        int(match.group("minute")),
        int(match.group("second")),
        microsecond,
    )


def as_text(value: Any) -> Any:
    """Render JSON scalars as text; ``None`` is passed through untouched."""
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    raise ValueError(f"expected a scalar value, got {type(value).__name__}")


def required_text(node: Dict[str, Any], key: str) -> str:
    value = node.get(key)
    if value is None:
        raise MissingFieldError(key)
    try:
        return as_text(value)
    except ValueError as exc:
        raise ShapeError(f"Field '{key}' {exc}") from exc


def string_list(node: Dict[str, Any], key: str) -> List[str]:
    """Read ``key`` as a list of strings; absent or null reads as empty."""
    value: Optional[Any] = node.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ShapeError(f"Field '{key}' must be an array, got {type(value).__name__}")

    items: List[str] = []
    for position, item in enumerate(value):
        if item is None:
            raise ShapeError(f"Field '{key}' has a null entry at position {position}")
        try:
            items.append(as_text(item))
        except ValueError as exc:
            raise ShapeError(f"Field '{key}' entry {position}: {exc}") from exc
    return items
