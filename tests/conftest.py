from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any, Callable, Dict, Generator

import pytest
from sqlalchemy.engine import Engine

from application_ingestor.db_connector import connect
from application_ingestor.schema_init import apply_schema

SAMPLE_APPLICATION: Dict[str, Any] = {
    "applicationId": "APP-2023-0001",
    "id": "e5b1c0de-0001",
    "applicationTypeId": "AT-7",
    "cachedLastUpdate": "2023-06-01 08:15:00.0",
    "decisionDate": "2023-07-15 12:00:00",
    "projectName": "Regional fleet extension",
    "submission": "2023-01-10 09:30:45.123",
    "projectManager": "P. Manager",
    "assuror": None,
    "modified": "2023-06-02 17:45:10",
    "applicationType": "Extension",
    "applicationTypeVariantVersion": "EXT-1.2",
    "caseType": "Authorisation",
    "completenessAcknowledgement": "2023-02-01 10:00:00",
    "issuingAuthority": "ERA",
    "legalDenomination": "Rail Vehicles Ltd",
    "applicationStatus": "Closed",
    "phase": "Decision",
    "subcategory": "Wagons",
    "isWholeEu": False,
    "preEngaged": True,
    "assessor": ["Alice Martin", "Bruno Keller"],
    "memberStates": ["DE", "FR", "AT"],
    "vehicleIdentifier": "A1, A2,A3",
}


@pytest.fixture()
def application_node() -> Callable[..., Dict[str, Any]]:
    """Build an application node from the sample, overriding or dropping keys."""

    def _build(drop: tuple[str, ...] = (), **overrides: Any) -> Dict[str, Any]:
        node = copy.deepcopy(SAMPLE_APPLICATION)
        node.update(overrides)
        for key in drop:
            node.pop(key, None)
        return node

    return _build


@pytest.fixture()
def write_json(tmp_path: Path) -> Callable[..., Path]:
    def _write(payload: Any, name: str = "application.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "import.sqlite"


@pytest.fixture()
def engine(db_path: Path) -> Generator[Engine, None, None]:
    eng = connect(str(db_path), create=True)
    apply_schema(eng)
    try:
        yield eng
    finally:
        eng.dispose()

