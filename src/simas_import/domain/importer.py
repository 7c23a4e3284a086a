"""Row pipeline: validate, resolve references, mint an id, then preview or commit.

Per row::

    validate -> resolve -> mint id -+-> (no transaction) PreviewResult
                                    +-> create -> audit -> CommitResult

Validation and resolution failures happen before an id is minted, so a failed
row leaves no trace. On commit the importer writes through the caller's unit of
work and never commits or rolls back itself: batching rows into one atomic unit
or isolating each row is the caller's decision.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal, TypeAlias

from simas_import.domain.errors import RowImportError
from simas_import.domain.identifiers import new_id
from simas_import.domain.model import AuditAction, Vacancy, parse_flag

if TYPE_CHECKING:
    from simas_import.domain.model import ImportRow
    from simas_import.domain.ports import AuditWriter, IdentifierGenerator, ImportUnitOfWork
    from simas_import.domain.resolution import ReferenceResolver

log = logging.getLogger(__name__)

VACANCY_ID_PREFIX = "VAG"
LOCKED_FIELD = "locked"


@dataclass(frozen=True, slots=True)
class PreviewResult:
    """Resolved record with its reserved id; nothing has been written."""

    record: Vacancy
    id: str


@dataclass(frozen=True, slots=True)
class CommitResult:
    """Confirmation that the record and its audit entry were written."""

    id: str
    message: str
    success: Literal[True] = True


ImportResult: TypeAlias = CommitResult | PreviewResult


@dataclass(slots=True)
class VacancyImporter:
    resolver: ReferenceResolver
    audit: AuditWriter
    generate_id: IdentifierGenerator = new_id
    prefix: str = VACANCY_ID_PREFIX

    async def build(self, row: ImportRow) -> Vacancy:
        """Validate and resolve ``row``, then mint the id of the record to create."""

        try:
            resolved = await self.resolver.resolve(row)
        except RowImportError as error:
            log.warning("Rejected row: %s", error)
            raise
        references = {field.target: resolved[field.name] for field in self.resolver.fields}
        return Vacancy(
            id=self.generate_id(self.prefix),
            locked=parse_flag(row.get(LOCKED_FIELD)),
            **references,
        )

    async def preview(self, row: ImportRow) -> PreviewResult:
        vacancy = await self.build(row)
        log.info("Previewed vacancy %s", vacancy.id)
        return PreviewResult(record=vacancy, id=vacancy.id)

    async def commit(
        self,
        row: ImportRow,
        *,
        transaction: ImportUnitOfWork,
        actor: str,
    ) -> CommitResult:
        vacancy = await self.build(row)
        try:
            transaction.repositories.vacancies.add(vacancy)
        except RowImportError as error:
            log.warning("Could not create vacancy %s: %s", vacancy.id, error)
            raise
        self.audit.record(
            actor,
            AuditAction.CREATE,
            vacancy.entity_type,
            vacancy.id,
            None,
            vacancy.snapshot(),
            transaction,
        )
        log.info("Created vacancy %s for %s", vacancy.id, actor)
        return CommitResult(id=vacancy.id, message=f"Vacancy {vacancy.id} created successfully.")

    async def process(
        self,
        row: ImportRow,
        *,
        actor: str,
        transaction: ImportUnitOfWork | None = None,
    ) -> ImportResult:
        """Commit ``row`` inside ``transaction`` or, without one, only preview it."""

        if transaction is None:
            return await self.preview(row)
        return await self.commit(row, transaction=transaction, actor=actor)
