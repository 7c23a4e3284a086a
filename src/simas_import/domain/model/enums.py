"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class ReferenceDomain(StrEnum):
    """Canonical reference tables a typed name can be resolved against."""

    POSITION = "position"
    DEPARTMENT = "department"
    NOTICE = "notice"


class EntityType(StrEnum):
    """Discriminator used by the audit trail to name the mutated table."""

    POSITION = "position"
    DEPARTMENT = "department"
    NOTICE = "notice"
    VACANCY = "vacancy"


class AuditAction(StrEnum):
    CREATE = "CREATE"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
