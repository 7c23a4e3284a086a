"""In-memory fuzzy matcher over the canonical reference tables.

Names are compared with the Levenshtein distance after ``default_process``
(lower-casing, non-alphanumerics replaced by spaces, trimmed), so the score of a
candidate is the number of single-character edits separating the two names.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import TYPE_CHECKING

from rapidfuzz import process
from rapidfuzz.distance import Levenshtein
from rapidfuzz.utils import default_process

from simas_import.config import DEFAULT_CANDIDATE_LIMIT, DEFAULT_MAX_DISTANCE
from simas_import.domain.model import MatchCandidate

if TYPE_CHECKING:
    from collections.abc import Iterable

    from simas_import.domain.model import CanonicalEntity, ReferenceDomain

log = logging.getLogger(__name__)


class RapidFuzzMatcher:
    """Rank canonical entities by edit distance to a typed name.

    Candidates farther than ``max_distance`` are dropped, so a query that resembles
    nothing yields an empty list. At most ``limit`` candidates are returned.
    """

    def __init__(
        self,
        entities: Iterable[CanonicalEntity] = (),
        *,
        max_distance: int = DEFAULT_MAX_DISTANCE,
        limit: int = DEFAULT_CANDIDATE_LIMIT,
    ) -> None:
        if max_distance < 0:
            raise ValueError("max_distance must be non-negative")
        if limit < 1:
            raise ValueError("limit must be at least 1")
        self.max_distance = max_distance
        self.limit = limit
        self._entities: dict[ReferenceDomain, list[CanonicalEntity]] = defaultdict(list)
        self._choices: dict[ReferenceDomain, list[str]] = defaultdict(list)
        for entity in entities:
            self.add(entity)

    def add(self, entity: CanonicalEntity) -> None:
        self._entities[entity.domain].append(entity)
        self._choices[entity.domain].append(default_process(entity.display_name))

    def __len__(self) -> int:
        return sum(len(entities) for entities in self._entities.values())

    def rank(self, domain: ReferenceDomain, query: str) -> list[MatchCandidate]:
        entities = self._entities.get(domain)
        processed = default_process(query)
        # nothing left to compare once punctuation is stripped
        if not entities or not processed:
            return []
        matches = process.extract(
            processed,
            self._choices[domain],
            scorer=Levenshtein.distance,
            score_cutoff=self.max_distance,
            limit=None,
        )
        candidates = [
            MatchCandidate(
                id=entities[index].id,
                display_name=entities[index].display_name,
                score=int(score),
            )
            for _choice, score, index in matches
        ]
        candidates.sort(key=lambda candidate: candidate.rank_key)
        log.debug("%s %r -> %d candidate(s)", domain, query, len(candidates))
        return candidates[: self.limit]

    async def search(self, domain: ReferenceDomain, query: str) -> list[MatchCandidate]:
        return self.rank(domain, query)


if TYPE_CHECKING:
    from simas_import.domain.ports import FuzzyMatcher

    _matcher_check: FuzzyMatcher = RapidFuzzMatcher()
