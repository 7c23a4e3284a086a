"""Transaction boundary handed to the importer by its caller."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from types import TracebackType

    from simas_import.domain.ports.persistence import (
        AuditLogRepository,
        ReferenceRepository,
        VacancyRepository,
    )


@dataclass(frozen=True, slots=True)
class ImportRepositories:
    """Repositories reachable from inside an import transaction."""

    vacancies: VacancyRepository
    audit_log: AuditLogRepository
    references: ReferenceRepository


@runtime_checkable
class ImportUnitOfWork(Protocol):
    """Every write made through ``repositories`` lands in one transaction.

    The owner of the unit of work decides when to ``commit``; leaving the ``with``
    block because of an exception rolls back.
    """

    @property
    def repositories(self) -> ImportRepositories: ...

    def __enter__(self) -> ImportUnitOfWork: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> bool: ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...
