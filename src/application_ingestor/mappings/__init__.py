"""Domain-specific ingest helpers."""

from . import (application, assessors, common, member_states, registry,
               vehicles)

__all__ = [
    "application",
    "assessors",
    "common",
    "member_states",
    "registry",
    "vehicles",
]
