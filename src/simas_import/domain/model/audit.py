"""Audit records for mutations applied by the importer."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .enums import AuditAction, EntityType


@dataclass(frozen=True, slots=True, kw_only=True)
class AuditEntry:
    """Append-only record of who changed which entity, from what state to what state."""

    id: str
    actor: str
    action: AuditAction
    entity_type: EntityType
    entity_id: str
    before: Mapping[str, object] | None = None
    after: Mapping[str, object] | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(tz=UTC))
