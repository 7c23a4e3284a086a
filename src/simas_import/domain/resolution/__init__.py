"""Resolution of typed reference names to canonical identifiers."""

from __future__ import annotations

from .fields import VACANCY_REFERENCE_FIELDS, ReferenceField
from .policy import DEFAULT_MATCH_THRESHOLD, rank_candidates, select_candidate
from .resolver import ReferenceResolver

__all__ = [
    "DEFAULT_MATCH_THRESHOLD",
    "VACANCY_REFERENCE_FIELDS",
    "ReferenceField",
    "ReferenceResolver",
    "rank_candidates",
    "select_candidate",
]
