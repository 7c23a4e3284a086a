"""Application orchestration entry points."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING

from simas_import.adapters.fuzzy_matcher import RapidFuzzMatcher
from simas_import.adapters.rows import VacancyRowPayload
from simas_import.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyImportUnitOfWork,
    is_started,
    startup,
)
from simas_import.config import ImportConfig, get_import_config
from simas_import.domain.audit import UnitOfWorkAuditWriter
from simas_import.domain.errors import PersistenceError, RowImportError
from simas_import.domain.identifiers import new_id
from simas_import.domain.importer import VacancyImporter
from simas_import.domain.model import CanonicalEntity, ReferenceDomain
from simas_import.domain.ports.unit_of_work import ImportUnitOfWork
from simas_import.domain.resolution import ReferenceResolver

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from simas_import.domain.importer import ImportResult
    from simas_import.domain.model import ImportRow
    from simas_import.domain.ports import FuzzyMatcher

UnitOfWorkFactory = Callable[[], ImportUnitOfWork]

REFERENCE_ID_PREFIXES: dict[ReferenceDomain, str] = {
    ReferenceDomain.POSITION: "CAR",
    ReferenceDomain.DEPARTMENT: "LOT",
    ReferenceDomain.NOTICE: "EDT",
}

log = getLogger(__name__)


class ImportIsolation(StrEnum):
    """How committed rows are grouped into transactions."""

    BATCH = "batch"  # one transaction, all rows or none
    ROW = "row"  # one transaction per row, failed rows are skipped


@dataclass(slots=True)
class RowFailure:
    index: int
    error: RowImportError


@dataclass(slots=True)
class ImportReport:
    """Outcome of importing a sequence of rows."""

    results: list[ImportResult] = field(default_factory=list)
    failures: list[RowFailure] = field(default_factory=list)
    committed: int = 0

    @property
    def ok(self) -> bool:
        return not self.failures


def build_importer(matcher: FuzzyMatcher, *, config: ImportConfig) -> VacancyImporter:
    """Wire the resolver and audit writer around ``matcher``."""

    return VacancyImporter(
        resolver=ReferenceResolver(matcher=matcher, threshold=config.match_threshold),
        audit=UnitOfWorkAuditWriter(prefix=config.audit_prefix),
        prefix=config.vacancy_prefix,
    )


def load_matcher(uow: ImportUnitOfWork, *, config: ImportConfig) -> RapidFuzzMatcher:
    """Index every canonical reference entity visible to ``uow``."""

    matcher = RapidFuzzMatcher(
        uow.repositories.references.all(),
        max_distance=config.max_distance,
        limit=config.candidate_limit,
    )
    log.info("Indexed %d reference entities", len(matcher))
    return matcher


def import_vacancy_rows(
    rows: Iterable[Mapping[str, object]],
    *,
    actor: str,
    preview: bool = False,
    isolation: ImportIsolation = ImportIsolation.BATCH,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    config: ImportConfig | None = None,
) -> ImportReport:
    """Import raw vacancy rows, or only preview them when ``preview`` is set."""

    if unit_of_work_factory is None:
        if not is_started():
            startup()
        unit_of_work_factory = SqlAlchemyImportUnitOfWork
    effective_config = config or get_import_config()
    import_rows = [VacancyRowPayload.model_validate(row).to_import_row() for row in rows]
    log.info(
        "Starting vacancy import: rows=%s, preview=%s, isolation=%s, actor=%s",
        len(import_rows),
        preview,
        isolation,
        actor,
    )

    if preview:
        runner = _preview_rows
    elif isolation is ImportIsolation.ROW:
        runner = _commit_rows_individually
    else:
        runner = _commit_rows_as_batch
    report = asyncio.run(runner(import_rows, actor, unit_of_work_factory, effective_config))

    log.info(
        "Finished vacancy import: results=%s, failures=%s, committed=%s",
        len(report.results),
        len(report.failures),
        report.committed,
    )
    return report


async def _preview_rows(
    rows: list[ImportRow],
    actor: str,
    unit_of_work_factory: UnitOfWorkFactory,
    config: ImportConfig,
) -> ImportReport:
    report = ImportReport()
    with unit_of_work_factory() as uow:
        importer = build_importer(load_matcher(uow, config=config), config=config)
    for index, row in enumerate(rows):
        try:
            report.results.append(await importer.process(row, actor=actor))
        except RowImportError as error:
            report.failures.append(RowFailure(index=index, error=error))
    return report


async def _commit_rows_as_batch(
    rows: list[ImportRow],
    actor: str,
    unit_of_work_factory: UnitOfWorkFactory,
    config: ImportConfig,
) -> ImportReport:
    report = ImportReport()
    with unit_of_work_factory() as uow:
        importer = build_importer(load_matcher(uow, config=config), config=config)
        for index, row in enumerate(rows):
            try:
                report.results.append(await importer.process(row, actor=actor, transaction=uow))
            except PersistenceError as error:
                # the transaction is unusable after a failed write
                report.failures.append(RowFailure(index=index, error=error))
                break
            except RowImportError as error:
                report.failures.append(RowFailure(index=index, error=error))
        if report.failures:
            uow.rollback()
            report.results.clear()
        else:
            uow.commit()
            report.committed = len(report.results)
    return report


async def _commit_rows_individually(
    rows: list[ImportRow],
    actor: str,
    unit_of_work_factory: UnitOfWorkFactory,
    config: ImportConfig,
) -> ImportReport:
    report = ImportReport()
    with unit_of_work_factory() as uow:
        importer = build_importer(load_matcher(uow, config=config), config=config)
    for index, row in enumerate(rows):
        try:
            with unit_of_work_factory() as uow:
                result = await importer.process(row, actor=actor, transaction=uow)
                uow.commit()
        except RowImportError as error:
            report.failures.append(RowFailure(index=index, error=error))
            continue
        report.results.append(result)
        report.committed += 1
    return report


def seed_references(
    names: Mapping[ReferenceDomain, Iterable[str]],
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> list[CanonicalEntity]:
    """Add canonical reference entries, minting an id for each display name."""

    if unit_of_work_factory is None:
        if not is_started():
            startup()
        unit_of_work_factory = SqlAlchemyImportUnitOfWork
    created: list[CanonicalEntity] = []
    with unit_of_work_factory() as uow:
        for domain, display_names in names.items():
            for display_name in display_names:
                name = display_name.strip()
                if not name:
                    raise ValueError(f"Blank {domain} name cannot be seeded")
                entity = CanonicalEntity(
                    id=new_id(REFERENCE_ID_PREFIXES[domain]),
                    display_name=name,
                    domain=domain,
                )
                uow.repositories.references.add(entity)
                created.append(entity)
        uow.commit()
    log.info("Seeded %d reference entities", len(created))
    return created
