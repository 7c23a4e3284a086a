"""Port for the audit trail writer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping

    from simas_import.domain.model import AuditAction, AuditEntry, EntityType
    from simas_import.domain.ports.unit_of_work import ImportUnitOfWork


class AuditWriter(Protocol):
    """Append an audit entry inside the caller's ``transaction``.

    Only called after the audited mutation has succeeded in that same transaction.
    """

    def record(
        self,
        actor: str,
        action: AuditAction,
        entity_type: EntityType,
        entity_id: str,
        before: Mapping[str, object] | None,
        after: Mapping[str, object] | None,
        transaction: ImportUnitOfWork,
    ) -> AuditEntry: ...
