"""Configuration loading for the application ingestor."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Optional

from dotenv import load_dotenv

TRUTHY = {"1", "true", "yes", "on"}


def _flag(value: Optional[str], default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in TRUTHY


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    apply_schema: bool = False
    echo_sql: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()
        return cls(
            log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO",
            apply_schema=_flag(os.getenv("DATABASE_APPLY_SCHEMA")),
            echo_sql=_flag(os.getenv("DATABASE_ECHO")),
        )

    def with_overrides(self, apply_schema: Optional[bool] = None) -> "Settings":
        # CLI flags only ever switch features on; absent flags keep the env value.
        if apply_schema:
            return replace(self, apply_schema=True)
        return self
