"""SQLAlchemy table metadata for reference tables, vacancies and the audit log."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Final

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    DateTime,
    Dialect,
    Enum,
    ForeignKey,
    MetaData,
    String,
    Table,
    TypeDecorator,
)

from simas_import.domain.model import AuditAction, EntityType, ReferenceDomain

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine


class UTCDateTime(TypeDecorator[datetime]):
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    def process_result_value(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        return value if value.tzinfo else value.replace(tzinfo=UTC)


metadata = MetaData(
    naming_convention={
        "ix": "ix_%(column_0_label)s",
        "uq": "uq_%(table_name)s_%(column_0_label)s",
        "ck": "ck_%(table_name)s_%(constraint_name)s",
        "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
        "pk": "pk_%(table_name)s",
    }
)

# Reference tables ------------------------------------------------------------


def _reference_table(name: str) -> Table:
    return Table(
        name,
        metadata,
        Column("id", String, primary_key=True),
        Column("name", String, nullable=False, index=True),
    )


position_table = _reference_table("position")
department_table = _reference_table("department")
notice_table = _reference_table("notice")

REFERENCE_TABLES: Final[dict[ReferenceDomain, Table]] = {
    ReferenceDomain.POSITION: position_table,
    ReferenceDomain.DEPARTMENT: department_table,
    ReferenceDomain.NOTICE: notice_table,
}

# Imported records ------------------------------------------------------------

vacancy_table = Table(
    "vacancy",
    metadata,
    Column("id", String, primary_key=True),
    Column("position_id", String, ForeignKey("position.id"), nullable=False),
    Column("department_id", String, ForeignKey("department.id"), nullable=False),
    Column("notice_id", String, ForeignKey("notice.id"), nullable=False),
    Column("locked", Boolean, nullable=False, default=False),
)

audit_log_table = Table(
    "audit_log",
    metadata,
    Column("id", String, primary_key=True),
    Column("created_at", UTCDateTime(), nullable=False),
    Column("actor", String, nullable=False),
    Column("action", Enum(AuditAction, native_enum=False), nullable=False),
    Column("entity_type", Enum(EntityType, native_enum=False), nullable=False),
    Column("entity_id", String, nullable=False, index=True),
    Column("before", JSON, nullable=True),
    Column("after", JSON, nullable=True),
)


def create_all_tables(engine: Engine) -> None:
    metadata.create_all(engine)
