"""Import application JSON documents into a relational database."""

from .errors import (ConstraintError, DatabaseConnectionError, FormatError,
                     IngestError, LoadError, MissingFieldError, ShapeError)
from .models import ImportSummary
from .writer import import_file, write_application

__all__ = [
    "ConstraintError",
    "DatabaseConnectionError",
    "FormatError",
    "ImportSummary",
    "IngestError",
    "LoadError",
    "MissingFieldError",
    "ShapeError",
    "import_file",
    "write_application",
]
