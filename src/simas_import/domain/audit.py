"""Audit trail writer that appends through the caller's unit of work."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from simas_import.domain.identifiers import new_id
from simas_import.domain.model import AuditEntry

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from simas_import.domain.model import AuditAction, EntityType
    from simas_import.domain.ports import IdentifierGenerator, ImportUnitOfWork

AUDIT_ID_PREFIX = "LOG"


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


@dataclass(slots=True)
class UnitOfWorkAuditWriter:
    """Write audit entries into ``transaction.repositories.audit_log``.

    The entry lands in the same transaction as the mutation it describes, so it is
    committed or rolled back together with it.
    """

    generate_id: IdentifierGenerator = new_id
    prefix: str = AUDIT_ID_PREFIX
    clock: Callable[[], datetime] = _utcnow

    def record(
        self,
        actor: str,
        action: AuditAction,
        entity_type: EntityType,
        entity_id: str,
        before: Mapping[str, object] | None,
        after: Mapping[str, object] | None,
        transaction: ImportUnitOfWork,
    ) -> AuditEntry:
        entry = AuditEntry(
            id=self.generate_id(self.prefix),
            actor=actor,
            action=action,
            entity_type=entity_type,
            entity_id=entity_id,
            before=dict(before) if before is not None else None,
            after=dict(after) if after is not None else None,
            created_at=self.clock(),
        )
        transaction.repositories.audit_log.add(entry)
        return entry
