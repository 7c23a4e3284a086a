"""The relational record created by an import."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .enums import EntityType


@dataclass(frozen=True, slots=True, kw_only=True)
class Vacancy:
    """A vacancy linking a position, a department and a public notice."""

    ENTITY_TYPE: ClassVar[EntityType] = EntityType.VACANCY

    id: str
    position_id: str
    department_id: str
    notice_id: str
    locked: bool = False

    @property
    def entity_type(self) -> EntityType:
        return self.ENTITY_TYPE

    def snapshot(self) -> dict[str, object]:
        """Return the JSON-ready state stored in the audit trail."""
        return {
            "id": self.id,
            "position_id": self.position_id,
            "department_id": self.department_id,
            "notice_id": self.notice_id,
            "locked": self.locked,
        }
