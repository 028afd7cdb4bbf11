"""Mapping of the application node onto the ``Applications`` table."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Dict, Optional

from pydantic import (BaseModel, BeforeValidator, ConfigDict, Field,
                      StrictBool, ValidationError)
from sqlalchemy.engine import Connection

from ..errors import FormatError, MissingFieldError
from ..logging_utils import get_logger
from ..schema import applications
from .common import as_text, parse_timestamp

logger = get_logger(__name__)

Text = Annotated[str, BeforeValidator(as_text)]
OptionalText = Annotated[Optional[str], BeforeValidator(as_text)]
Timestamp = Annotated[datetime, BeforeValidator(parse_timestamp)]


class ApplicationRecord(BaseModel):
    """One ``Applications`` row; field names are the column names."""

    application_id: Text = Field(alias="applicationId")
    id: Text = Field(alias="id")
    application_type_id: Text = Field(alias="applicationTypeId")
    cached_last_update: Timestamp = Field(alias="cachedLastUpdate")
    decision_date: Timestamp = Field(alias="decisionDate")
    project_name: Text = Field(alias="projectName")
    submission: Timestamp = Field(alias="submission")
    project_manager: OptionalText = Field(default=None, alias="projectManager")
    assuror: OptionalText = Field(default=None, alias="assuror")
    decision_maker: OptionalText = Field(default=None, alias="decisionMaker")
    modified: Timestamp = Field(alias="modified")
    application_type: Text = Field(alias="applicationType")
    application_type_variant_version: Text = Field(
        alias="applicationTypeVariantVersion"
    )
    case_type: Text = Field(alias="caseType")
    completeness_acknowledgement: Timestamp = Field(
        alias="completenessAcknowledgement"
    )
    issuing_authority: Text = Field(alias="issuingAuthority")
    ein: OptionalText = Field(default=None, alias="ein")
    legal_denomination: Text = Field(alias="legalDenomination")
    application_status: Text = Field(alias="applicationStatus")
    phase: Text = Field(alias="phase")
    subcategory: Text = Field(alias="subcategory")
    is_whole_eu: StrictBool = Field(alias="isWholeEu")
    pre_engaged: StrictBool = Field(alias="preEngaged")

    model_config = ConfigDict(extra="ignore", frozen=True)

    def to_row(self) -> Dict[str, Any]:
        return self.model_dump()


def _translate(exc: ValidationError) -> Exception:
    # Errors come back in field declaration order, i.e. column order.
    first = exc.errors()[0]
    field = str(first["loc"][0]) if first["loc"] else "<application>"
    if first["type"] == "missing" or first.get("input") is None:
        return MissingFieldError(field)
    reason = first.get("msg", "")
    prefix = "Value error, "
    if reason.startswith(prefix):
        reason = reason[len(prefix):]
    return FormatError(field, first.get("input"), reason)


def map_application(node: Dict[str, Any]) -> ApplicationRecord:
    try:
        return ApplicationRecord.model_validate(node)
    except ValidationError as exc:
        raise _translate(exc) from exc


def insert_application(conn: Connection, record: ApplicationRecord) -> str:
    conn.execute(applications.insert(), [record.to_row()])
    logger.debug("Inserted application %s", record.application_id)
    return record.application_id
