"""Exception hierarchy raised while importing an application document."""

from __future__ import annotations

from typing import Any, Optional


class IngestError(Exception):
    """Base class for every failure that aborts an import."""


class LoadError(IngestError):
    """Raised when the input file cannot be read or parsed as JSON."""


class ShapeError(IngestError):
    """Raised when the document structure does not match the expected layout."""


class MissingFieldError(IngestError):
    """Raised when a required field is absent (or null) in the application node."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Required field '{field}' is missing")
        self.field = field


class FormatError(IngestError):
    """Raised when a field is present but cannot be read as its expected type."""

    def __init__(self, field: str, value: Any, reason: Optional[str] = None) -> None:
        message = f"Field '{field}' has unparsable value {value!r}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.field = field
        self.value = value
        self.reason = reason


class ConstraintError(IngestError):
    """Raised when the database rejects a write (duplicate key, unique name...)."""


class DatabaseConnectionError(IngestError):
    """Raised when the target database cannot be reached."""
