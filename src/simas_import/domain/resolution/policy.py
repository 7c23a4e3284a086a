"""Threshold policy applied to the candidates returned for one field.

This stage is deterministic given the candidate list: candidates are re-ranked by
``(score, casefolded display name, id)`` so that ties between equally distant
names never depend on the order the search service happened to return them in.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from simas_import.domain.errors import AmbiguityError, ConsistencyError, NotFoundError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from simas_import.domain.model import MatchCandidate

DEFAULT_MATCH_THRESHOLD = 2


def rank_candidates(candidates: Iterable[MatchCandidate]) -> list[MatchCandidate]:
    return sorted(candidates, key=lambda candidate: candidate.rank_key)


def select_candidate(
    field: str,
    query: str,
    candidates: Iterable[MatchCandidate],
    *,
    threshold: int = DEFAULT_MATCH_THRESHOLD,
) -> str:
    """Return the canonical id for ``query`` or raise the matching field error."""

    ranked = rank_candidates(candidates)
    if not ranked:
        raise NotFoundError(field, query)
    best = ranked[0]
    if best.score > threshold:
        raise AmbiguityError(field, query, best.score, threshold)
    if not best.id:
        raise ConsistencyError(field, query)
    return best.id
