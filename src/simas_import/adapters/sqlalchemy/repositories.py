"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from simas_import.adapters.sqlalchemy.mappings import (
    REFERENCE_TABLES,
    audit_log_table,
    vacancy_table,
)
from simas_import.domain.errors import PersistenceError
from simas_import.domain.model import (
    AuditEntry,
    CanonicalEntity,
    EntityType,
    ReferenceDomain,
    Vacancy,
)

if TYPE_CHECKING:
    from sqlalchemy import Executable
    from sqlalchemy.orm import Session


def _execute_write(session: Session, stmt: Executable, description: str) -> None:
    try:
        session.execute(stmt)
    except SQLAlchemyError as exc:
        raise PersistenceError(f"Could not {description}: {exc.__class__.__name__}") from exc


class SqlAlchemyVacancyRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, entity: Vacancy) -> None:
        stmt = vacancy_table.insert().values(
            id=entity.id,
            position_id=entity.position_id,
            department_id=entity.department_id,
            notice_id=entity.notice_id,
            locked=entity.locked,
        )
        _execute_write(self.session, stmt, f"create vacancy {entity.id}")

    def get(self, vacancy_id: str) -> Vacancy | None:
        stmt = select(vacancy_table).where(vacancy_table.c.id == vacancy_id)
        row = self.session.execute(stmt).mappings().one_or_none()
        if row is None:
            return None
        return Vacancy(
            id=row["id"],
            position_id=row["position_id"],
            department_id=row["department_id"],
            notice_id=row["notice_id"],
            locked=bool(row["locked"]),
        )


class SqlAlchemyAuditLogRepository:
    """Append-only: entries are inserted and read back, never updated."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, entity: AuditEntry) -> None:
        stmt = audit_log_table.insert().values(
            id=entity.id,
            created_at=entity.created_at,
            actor=entity.actor,
            action=entity.action,
            entity_type=entity.entity_type,
            entity_id=entity.entity_id,
            before=dict(entity.before) if entity.before is not None else None,
            after=dict(entity.after) if entity.after is not None else None,
        )
        _execute_write(self.session, stmt, f"write audit entry for {entity.entity_id}")

    def for_entity(self, entity_type: EntityType, entity_id: str) -> list[AuditEntry]:
        stmt = (
            select(audit_log_table)
            .where(audit_log_table.c.entity_type == entity_type)
            .where(audit_log_table.c.entity_id == entity_id)
            .order_by(audit_log_table.c.created_at, audit_log_table.c.id)
        )
        return [
            AuditEntry(
                id=row["id"],
                actor=row["actor"],
                action=row["action"],
                entity_type=row["entity_type"],
                entity_id=row["entity_id"],
                before=row["before"],
                after=row["after"],
                created_at=row["created_at"],
            )
            for row in self.session.execute(stmt).mappings()
        ]


class SqlAlchemyReferenceRepository:
    """Canonical position, department and notice rows, dispatched by domain."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, entity: CanonicalEntity) -> None:
        table = REFERENCE_TABLES[entity.domain]
        stmt = table.insert().values(id=entity.id, name=entity.display_name)
        _execute_write(self.session, stmt, f"create {entity.domain} {entity.id}")

    def all(self, domain: ReferenceDomain | None = None) -> list[CanonicalEntity]:
        domains = (domain,) if domain is not None else tuple(ReferenceDomain)
        entities: list[CanonicalEntity] = []
        for current in domains:
            table = REFERENCE_TABLES[current]
            stmt = select(table.c.id, table.c.name).order_by(table.c.name, table.c.id)
            entities.extend(
                CanonicalEntity(id=entity_id, display_name=name, domain=current)
                for entity_id, name in self.session.execute(stmt)
            )
        return entities


if TYPE_CHECKING:
    from typing import cast

    from simas_import.domain.ports.persistence import (
        AuditLogRepository,
        ReferenceRepository,
        VacancyRepository,
    )

    _session_stub = cast("Session", object())
    _vacancy_repo: VacancyRepository = SqlAlchemyVacancyRepository(_session_stub)
    _audit_repo: AuditLogRepository = SqlAlchemyAuditLogRepository(_session_stub)
    _reference_repo: ReferenceRepository = SqlAlchemyReferenceRepository(_session_stub)
