"""Port for the fuzzy candidate search over reference tables."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from simas_import.domain.model import MatchCandidate, ReferenceDomain


@runtime_checkable
class FuzzyMatcher(Protocol):
    """Rank the canonical entities of ``domain`` against a typed ``query``.

    Results are ordered by ascending score. An empty sequence means nothing
    resembles the query.
    """

    async def search(self, domain: ReferenceDomain, query: str) -> Sequence[MatchCandidate]: ...
