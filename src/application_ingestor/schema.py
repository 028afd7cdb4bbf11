"""SQLAlchemy table definitions for the application import target."""

from __future__ import annotations

from sqlalchemy import (Boolean, Column, DateTime, ForeignKey, Integer,
                        MetaData, Table, Text, UniqueConstraint)

metadata = MetaData()

applications = Table(
    "Applications",
    metadata,
    Column("application_id", Text, primary_key=True),
    Column("id", Text, nullable=False),
    Column("application_type_id", Text, nullable=False),
    Column("cached_last_update", DateTime, nullable=False),
    Column("decision_date", DateTime, nullable=False),
    Column("project_name", Text, nullable=False),
    Column("submission", DateTime, nullable=False),
    Column("project_manager", Text),
    Column("assuror", Text),
    Column("decision_maker", Text),
    Column("modified", DateTime, nullable=False),
    Column("application_type", Text, nullable=False),
    Column("application_type_variant_version", Text, nullable=False),
    Column("case_type", Text, nullable=False),
    Column("completeness_acknowledgement", DateTime, nullable=False),
    Column("issuing_authority", Text, nullable=False),
    Column("ein", Text),
    Column("legal_denomination", Text, nullable=False),
    Column("application_status", Text, nullable=False),
    Column("phase", Text, nullable=False),
    Column("subcategory", Text, nullable=False),
    Column("is_whole_eu", Boolean, nullable=False),
    Column("pre_engaged", Boolean, nullable=False),
)

assessors = Table(
    "Assessors",
    metadata,
    Column("assessor_id", Integer, primary_key=True, autoincrement=True),
    Column("name", Text, nullable=False),
    UniqueConstraint("name", name="uq_assessors_name"),
)

application_assessors = Table(
    "ApplicationAssessors",
    metadata,
    Column(
        "application_id",
        Text,
        ForeignKey("Applications.application_id"),
        nullable=False,
    ),
    Column(
        "assessor_id",
        Integer,
        ForeignKey("Assessors.assessor_id"),
        nullable=False,
    ),
)

application_member_states = Table(
    "ApplicationMemberStates",
    metadata,
    Column(
        "application_id",
        Text,
        ForeignKey("Applications.application_id"),
        nullable=False,
    ),
    Column("state_code", Text, nullable=False),
)

vehicles = Table(
    "Vehicles",
    metadata,
    Column(
        "application_id",
        Text,
        ForeignKey("Applications.application_id"),
        nullable=False,
    ),
    Column("identifier", Text, nullable=False),
)

ALL_TABLES = (
    applications,
    assessors,
    application_assessors,
    application_member_states,
    vehicles,
)
