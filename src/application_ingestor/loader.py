"""Read the application JSON document from disk."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Union

from .errors import LoadError, ShapeError
from .logging_utils import get_logger

logger = get_logger(__name__)

APPLICATION_LIST_KEY = "applicationListDTO"

PathLike = Union[str, Path]


def load_document(path: PathLike) -> Dict[str, Any]:
    source = Path(path)
    try:
        raw = source.read_text(encoding="utf-8-sig")
    except FileNotFoundError as exc:
        raise LoadError(f"Input file not found: {source}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise LoadError(f"Cannot read input file {source}: {exc}") from exc

    try:
        document = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise LoadError(f"Malformed JSON in {source}: {exc}") from exc

    if not isinstance(document, dict):
        raise ShapeError(
            f"Expected a JSON object at the top level of {source}, "
            f"got {type(document).__name__}"
        )
    return document


def first_application(document: Dict[str, Any]) -> Dict[str, Any]:
    """Return the first entry of ``applicationListDTO``; later entries are ignored."""
    if APPLICATION_LIST_KEY not in document:
        raise ShapeError(f"Field '{APPLICATION_LIST_KEY}' is missing")

    entries = document[APPLICATION_LIST_KEY]
    if not isinstance(entries, list):
        raise ShapeError(f"Field '{APPLICATION_LIST_KEY}' must be an array")
    if not entries:
        raise ShapeError(f"Field '{APPLICATION_LIST_KEY}' is empty")
    if len(entries) > 1:
        logger.warning(
            "%s contains %s applications; only the first is imported",
            APPLICATION_LIST_KEY,
            len(entries),
        )

    node = entries[0]
    if not isinstance(node, dict):
        raise ShapeError(f"First element of '{APPLICATION_LIST_KEY}' must be an object")
    return node


def load_application(path: PathLike) -> Dict[str, Any]:
    return first_application(load_document(path))
