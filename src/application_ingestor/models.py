from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict


@dataclass
class ImportSummary:
    """Outcome of one committed import: the application id and rows per table."""

    application_id: str
    rows: Dict[str, int] = field(default_factory=dict)

    @property
    def total_rows(self) -> int:
        return sum(self.rows.values())

    def describe(self) -> str:
        counts = ", ".join(f"{table}={count}" for table, count in self.rows.items())
        return f"application {self.application_id}: {counts}"
