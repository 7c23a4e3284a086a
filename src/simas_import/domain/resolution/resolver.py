"""Concurrent resolution of every reference field of a row."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, cast

from simas_import.domain.errors import FieldResolutionError, MissingFieldsError, ResolutionError

from .fields import VACANCY_REFERENCE_FIELDS, ReferenceField
from .policy import DEFAULT_MATCH_THRESHOLD, select_candidate

if TYPE_CHECKING:
    from collections.abc import Sequence

    from simas_import.domain.model import ImportRow, MatchCandidate
    from simas_import.domain.ports import FuzzyMatcher

log = logging.getLogger(__name__)


@dataclass(slots=True)
class ReferenceResolver:
    """Map the display names of a row to canonical identifiers.

    All lookups of a row run concurrently and the resolver always waits for every
    one of them, so that a row with several bad fields reports all of them at once
    instead of one per attempt.
    """

    matcher: FuzzyMatcher
    fields: tuple[ReferenceField, ...] = VACANCY_REFERENCE_FIELDS
    threshold: int = DEFAULT_MATCH_THRESHOLD

    def __post_init__(self) -> None:
        if self.threshold < 0:
            raise ValueError("threshold must be non-negative")
        if not self.fields:
            raise ValueError("at least one reference field is required")

    def queries(self, row: ImportRow) -> dict[str, str]:
        """Return the stripped query per field or raise if any field is missing."""

        queries: dict[str, str] = {}
        missing: list[str] = []
        for field in self.fields:
            value = row.get(field.name)
            if not isinstance(value, str) or not value.strip():
                missing.append(field.name)
                continue
            queries[field.name] = value.strip()
        if missing:
            raise MissingFieldsError(missing)
        return queries

    async def resolve(self, row: ImportRow) -> dict[str, str]:
        """Return ``{field name: canonical id}`` for every reference field of ``row``."""

        queries = self.queries(row)
        outcomes = await asyncio.gather(
            *(self.matcher.search(field.domain, queries[field.name]) for field in self.fields),
            return_exceptions=True,
        )

        for outcome in outcomes:
            if isinstance(outcome, BaseException):
                raise outcome

        resolved: dict[str, str] = {}
        failures: list[FieldResolutionError] = []
        for field, candidates in zip(self.fields, outcomes, strict=True):
            query = queries[field.name]
            try:
                resolved[field.name] = select_candidate(
                    field.name,
                    query,
                    cast("Sequence[MatchCandidate]", candidates),
                    threshold=self.threshold,
                )
            except FieldResolutionError as error:
                log.info("Could not resolve %s=%r: %s", field.name, query, error)
                failures.append(error)

        if failures:
            raise ResolutionError(failures)
        return resolved
