"""Domain port definitions for adapters."""

from __future__ import annotations

from .audit import AuditWriter
from .identifiers import IdentifierGenerator
from .matching import FuzzyMatcher
from .persistence import (
    AuditLogRepository,
    ReferenceRepository,
    Repository,
    VacancyRepository,
)
from .unit_of_work import (
    ImportRepositories,
    ImportUnitOfWork,
)

__all__ = [
    "AuditLogRepository",
    "AuditWriter",
    "FuzzyMatcher",
    "IdentifierGenerator",
    "ImportRepositories",
    "ImportUnitOfWork",
    "ReferenceRepository",
    "Repository",
    "VacancyRepository",
]
