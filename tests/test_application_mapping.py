from __future__ import annotations

from datetime import datetime

import pytest

from application_ingestor.errors import FormatError, MissingFieldError
from application_ingestor.mappings.application import map_application
from application_ingestor.mappings.common import parse_timestamp


def test_maps_all_columns(application_node) -> None:
    record = map_application(application_node())
    row = record.to_row()

    assert len(row) == 23
    assert row["application_id"] == "APP-2023-0001"
    assert row["submission"] == datetime(2023, 1, 10, 9, 30, 45, 123000)
    assert row["cached_last_update"] == datetime(2023, 6, 1, 8, 15)
    assert row["project_manager"] == "P. Manager"
    assert row["assuror"] is None
    assert row["decision_maker"] is None
    assert row["ein"] is None
    assert row["is_whole_eu"] is False
    assert row["pre_engaged"] is True


def test_optional_fields_keep_values(application_node) -> None:
    record = map_application(
        application_node(assuror="Q. Assuror", decisionMaker="D. Maker", ein="EIN-9")
    )
    assert (record.assuror, record.decision_maker, record.ein) == (
        "Q. Assuror",
        "D. Maker",
        "EIN-9",
    )


def test_numeric_text_fields_are_rendered_as_text(application_node) -> None:
    record = map_application(application_node(applicationTypeId=42, phase=1.5))
    assert record.application_type_id == "42"
    assert record.phase == "1.5"


def test_missing_required_field_is_named(application_node) -> None:
    with pytest.raises(MissingFieldError) as excinfo:
        map_application(application_node(drop=("legalDenomination",)))
    assert excinfo.value.field == "legalDenomination"


def test_null_required_field_counts_as_missing(application_node) -> None:
    with pytest.raises(MissingFieldError) as excinfo:
        map_application(application_node(decisionDate=None))
    assert excinfo.value.field == "decisionDate"


def test_first_invalid_column_is_reported(application_node) -> None:
    node = application_node(drop=("applicationId", "phase"), submission="bad")
    with pytest.raises(MissingFieldError) as excinfo:
        map_application(node)
    assert excinfo.value.field == "applicationId"


@pytest.mark.parametrize(
    "raw",
    ["not-a-date", "2023-01-10T09:30:45", "2023-01-10 09:30", "2023-02-30 10:00:00", 20230110],
)
def test_malformed_timestamp_is_format_error(application_node, raw) -> None:
    with pytest.raises(FormatError) as excinfo:
        map_application(application_node(submission=raw))
    assert excinfo.value.field == "submission"
    assert excinfo.value.value == raw


@pytest.mark.parametrize("raw", ["true", 1, 0, "false"])
def test_non_boolean_flag_is_format_error(application_node, raw) -> None:
    with pytest.raises(FormatError) as excinfo:
        map_application(application_node(isWholeEu=raw))
    assert excinfo.value.field == "isWholeEu"


def test_structured_value_for_text_field_is_format_error(application_node) -> None:
    with pytest.raises(FormatError) as excinfo:
        map_application(application_node(projectName={"en": "Fleet"}))
    assert excinfo.value.field == "projectName"


def test_parse_timestamp_truncates_nanoseconds() -> None:
    assert parse_timestamp("2024-3-7 01:02:03.123456789") == datetime(
        2024, 3, 7, 1, 2, 3, 123456
    )
    assert parse_timestamp("2024-03-07 01:02:03.5") == datetime(
        2024, 3, 7, 1, 2, 3, 500000
    )


def test_column_names_are_not_accepted_as_json_keys(application_node) -> None:
    node = application_node(drop=("applicationId",), application_id="X")
    with pytest.raises(MissingFieldError) as excinfo:
        map_application(node)
    assert excinfo.value.field == "applicationId"


def test_timestamp_surrounding_whitespace_is_ignored(application_node) -> None:
    record = map_application(application_node(submission=" 2023-01-10 09:30:45 "))
    assert record.submission == datetime(2023, 1, 10, 9, 30, 45)
