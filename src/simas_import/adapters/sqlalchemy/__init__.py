"""SQLAlchemy adapter package."""

from __future__ import annotations

from .mappings import (
    REFERENCE_TABLES,
    audit_log_table,
    create_all_tables,
    metadata,
    vacancy_table,
)
from .repositories import (
    SqlAlchemyAuditLogRepository,
    SqlAlchemyReferenceRepository,
    SqlAlchemyVacancyRepository,
)
from .unit_of_work import (
    SqlAlchemyImportUnitOfWork,
    StartupError,
    configured_engine,
    is_started,
    shutdown,
    startup,
)

__all__ = [
    "REFERENCE_TABLES",
    "SqlAlchemyAuditLogRepository",
    "SqlAlchemyImportUnitOfWork",
    "SqlAlchemyReferenceRepository",
    "SqlAlchemyVacancyRepository",
    "StartupError",
    "audit_log_table",
    "configured_engine",
    "create_all_tables",
    "is_started",
    "metadata",
    "shutdown",
    "startup",
    "vacancy_table",
]
