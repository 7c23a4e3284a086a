"""Canonical reference records and the candidates produced when matching against them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .enums import ReferenceDomain


@dataclass(frozen=True, slots=True)
class CanonicalEntity:
    """Authoritative row of a reference table. Read-only for the importer."""

    id: str
    display_name: str
    domain: ReferenceDomain


@dataclass(frozen=True, slots=True)
class MatchCandidate:
    """One ranked hit of a fuzzy lookup.

    ``score`` is the edit distance between the query and ``display_name``; lower is
    better and ``0`` means an exact match. ``id`` may be missing when the reference
    table holds a broken row.
    """

    id: str | None
    display_name: str
    score: int

    @property
    def rank_key(self) -> tuple[int, str, str]:
        return (self.score, self.display_name.casefold(), self.id or "")
