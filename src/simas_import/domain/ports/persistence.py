"""Ports for persisting import records."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

from simas_import.domain.model import AuditEntry, CanonicalEntity, Vacancy

if TYPE_CHECKING:
    from simas_import.domain.model import EntityType, ReferenceDomain


TEntity = TypeVar("TEntity", contravariant=True)


@runtime_checkable
class Repository(Protocol[TEntity]):
    """Minimal repository contract for a persistent store."""

    def add(self, entity: TEntity) -> None: ...


@runtime_checkable
class VacancyRepository(Repository[Vacancy], Protocol):
    """Persistence contract for vacancies. ``add`` is the scoped create used on commit."""

    def get(self, vacancy_id: str) -> Vacancy | None: ...


@runtime_checkable
class AuditLogRepository(Repository[AuditEntry], Protocol):
    """Append-only persistence contract for audit entries."""

    def for_entity(self, entity_type: EntityType, entity_id: str) -> list[AuditEntry]: ...


@runtime_checkable
class ReferenceRepository(Repository[CanonicalEntity], Protocol):
    """Read access to the canonical reference tables."""

    def all(self, domain: ReferenceDomain | None = None) -> list[CanonicalEntity]: ...
