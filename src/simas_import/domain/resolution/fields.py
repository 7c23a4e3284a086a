"""Which row fields reference which canonical table."""

from __future__ import annotations

from dataclasses import dataclass

from simas_import.domain.model import ReferenceDomain


@dataclass(frozen=True, slots=True)
class ReferenceField:
    """A required row field holding a display name of a ``domain`` entity.

    ``target`` names the attribute of the created record that receives the
    resolved identifier.
    """

    name: str
    domain: ReferenceDomain
    target: str


VACANCY_REFERENCE_FIELDS: tuple[ReferenceField, ...] = (
    ReferenceField("position_name", ReferenceDomain.POSITION, "position_id"),
    ReferenceField("department_name", ReferenceDomain.DEPARTMENT, "department_id"),
    ReferenceField("notice_name", ReferenceDomain.NOTICE, "notice_id"),
)
