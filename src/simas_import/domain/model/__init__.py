"""Public domain model surface."""

from __future__ import annotations

from simas_import.domain.model.audit import AuditEntry
from simas_import.domain.model.enums import AuditAction, EntityType, ReferenceDomain
from simas_import.domain.model.reference import CanonicalEntity, MatchCandidate
from simas_import.domain.model.row import TRUE_FLAG_VALUES, ImportRow, parse_flag
from simas_import.domain.model.vacancy import Vacancy

__all__ = [  # noqa: RUF022
    # reference data
    "CanonicalEntity",
    "MatchCandidate",
    # rows
    "ImportRow",
    "TRUE_FLAG_VALUES",
    "parse_flag",
    # records
    "Vacancy",
    "AuditEntry",
    # enums
    "AuditAction",
    "EntityType",
    "ReferenceDomain",
]
