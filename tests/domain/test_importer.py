from __future__ import annotations

import asyncio

import pytest

from simas_import.adapters.fuzzy_matcher import RapidFuzzMatcher
from simas_import.domain.audit import UnitOfWorkAuditWriter
from simas_import.domain.errors import MissingFieldsError, PersistenceError, ResolutionError
from simas_import.domain.importer import CommitResult, PreviewResult, VacancyImporter
from simas_import.domain.model import AuditAction, EntityType
from simas_import.domain.resolution import ReferenceResolver
from tests.helpers.fakes import FakeUnitOfWork, InMemoryVacancyRepository, SequenceIdGenerator
from tests.helpers.references import ANALYST, EDUCATION, HEALTH, NOTICE_01, vacancy_row


def _importer(
    matcher: RapidFuzzMatcher,
    *,
    generate_id: SequenceIdGenerator | None = None,
) -> VacancyImporter:
    importer = VacancyImporter(
        resolver=ReferenceResolver(matcher=matcher),
        audit=UnitOfWorkAuditWriter(generate_id=SequenceIdGenerator()),
    )
    if generate_id is not None:
        importer.generate_id = generate_id
    return importer


def test_preview_returns_resolved_record_without_writing(
    reference_matcher: RapidFuzzMatcher,
) -> None:
    importer = _importer(reference_matcher)
    uow = FakeUnitOfWork()

    result = asyncio.run(importer.preview(vacancy_row(locked="1")))

    assert isinstance(result, PreviewResult)
    assert result.id == result.record.id
    assert result.id.startswith("VAG-")
    assert result.record.position_id == ANALYST.id
    assert result.record.department_id == HEALTH.id
    assert result.record.notice_id == NOTICE_01.id
    assert result.record.locked is True
    assert uow.vacancies.items == {}
    assert uow.audit_log.entries == []


def test_preview_resolves_identically_but_mints_fresh_ids(
    reference_matcher: RapidFuzzMatcher,
) -> None:
    importer = _importer(reference_matcher)
    row = vacancy_row(position_name="Anlista")

    first = asyncio.run(importer.preview(row))
    second = asyncio.run(importer.preview(row))

    assert first.id != second.id
    assert first.record.position_id == second.record.position_id == ANALYST.id
    assert first.record.department_id == second.record.department_id
    assert first.record.notice_id == second.record.notice_id


def test_commit_creates_record_and_one_audit_entry(reference_matcher: RapidFuzzMatcher) -> None:
    importer = _importer(reference_matcher)
    uow = FakeUnitOfWork()

    result = asyncio.run(
        importer.commit(vacancy_row(locked="true"), transaction=uow, actor="maria")
    )

    assert isinstance(result, CommitResult)
    assert result.success is True
    assert result.id in result.message
    vacancy = uow.vacancies.get(result.id)
    assert vacancy is not None
    assert vacancy.locked is True

    entries = uow.audit_log.for_entity(EntityType.VACANCY, result.id)
    assert len(entries) == 1
    entry = entries[0]
    assert entry.action is AuditAction.CREATE
    assert entry.actor == "maria"
    assert entry.before is None
    assert entry.after == vacancy.snapshot()
    assert entry.id.startswith("LOG-")


def test_commit_never_commits_the_callers_transaction(
    reference_matcher: RapidFuzzMatcher,
) -> None:
    importer = _importer(reference_matcher)
    uow = FakeUnitOfWork()

    asyncio.run(importer.commit(vacancy_row(), transaction=uow, actor="maria"))

    assert uow.commits == 0
    assert uow.rollbacks == 0


def test_failed_create_writes_no_audit_entry(reference_matcher: RapidFuzzMatcher) -> None:
    generator = SequenceIdGenerator()
    importer = _importer(reference_matcher, generate_id=generator)
    uow = FakeUnitOfWork(
        vacancies=InMemoryVacancyRepository(fail_with=PersistenceError("disk full")),
    )

    with pytest.raises(PersistenceError, match="disk full"):
        asyncio.run(importer.commit(vacancy_row(), transaction=uow, actor="maria"))

    assert uow.audit_log.for_entity(EntityType.VACANCY, "VAG-0001") == []
    assert uow.audit_log.entries == []


def test_rejected_row_mints_no_identifier(reference_matcher: RapidFuzzMatcher) -> None:
    generator = SequenceIdGenerator()
    importer = _importer(reference_matcher, generate_id=generator)
    uow = FakeUnitOfWork()

    with pytest.raises(ResolutionError):
        asyncio.run(
            importer.commit(
                vacancy_row(department_name="Zzzzzzzzzzzz"),
                transaction=uow,
                actor="maria",
            )
        )
    with pytest.raises(MissingFieldsError):
        asyncio.run(importer.preview({}))

    assert generator.prefixes == []
    assert uow.vacancies.items == {}
    assert uow.audit_log.entries == []


@pytest.mark.parametrize(
    ("locked", "expected"),
    [("true", True), ("1", True), ("false", False), ("0", False), ("TRUE", False), (None, False)],
)
def test_lock_flag_parsing(
    reference_matcher: RapidFuzzMatcher,
    locked: str | None,
    expected: bool,
) -> None:
    importer = _importer(reference_matcher)

    result = asyncio.run(importer.preview(vacancy_row(locked=locked)))

    assert result.record.locked is expected


def test_absent_lock_flag_means_unlocked(reference_matcher: RapidFuzzMatcher) -> None:
    importer = _importer(reference_matcher)

    result = asyncio.run(importer.preview(vacancy_row()))

    assert result.record.locked is False


def test_process_dispatches_on_transaction(reference_matcher: RapidFuzzMatcher) -> None:
    importer = _importer(reference_matcher)
    uow = FakeUnitOfWork()
    row = vacancy_row(department_name="Secretaria de Educacao")

    preview = asyncio.run(importer.process(row, actor="maria"))
    commit = asyncio.run(importer.process(row, actor="maria", transaction=uow))

    assert isinstance(preview, PreviewResult)
    assert isinstance(commit, CommitResult)
    assert preview.id != commit.id
    assert uow.vacancies.get(preview.id) is None
    created = uow.vacancies.get(commit.id)
    assert created is not None
    assert created.department_id == EDUCATION.id
