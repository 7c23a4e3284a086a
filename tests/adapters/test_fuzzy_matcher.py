from __future__ import annotations

import asyncio

import pytest

from simas_import.adapters.fuzzy_matcher import RapidFuzzMatcher
from simas_import.domain.model import CanonicalEntity, ReferenceDomain
from tests.helpers.references import ANALYST, NOTICE_01, NOTICE_02, REFERENCE_ENTITIES


def test_search_scores_exact_match_as_zero(reference_matcher: RapidFuzzMatcher) -> None:
    candidates = asyncio.run(reference_matcher.search(ReferenceDomain.POSITION, "Analista"))

    assert candidates[0].id == ANALYST.id
    assert candidates[0].score == 0


def test_search_scores_typos_by_edit_distance(reference_matcher: RapidFuzzMatcher) -> None:
    candidates = reference_matcher.rank(ReferenceDomain.POSITION, "Anlista")

    assert candidates[0].id == ANALYST.id
    assert candidates[0].display_name == "Analista"
    assert candidates[0].score == 1


def test_search_ignores_case_and_punctuation(reference_matcher: RapidFuzzMatcher) -> None:
    candidates = reference_matcher.rank(ReferenceDomain.NOTICE, "EDITAL 01-2024")

    assert candidates[0].id == NOTICE_01.id
    assert candidates[0].score == 0


def test_search_returns_candidates_in_ascending_score(
    reference_matcher: RapidFuzzMatcher,
) -> None:
    candidates = reference_matcher.rank(ReferenceDomain.NOTICE, "Edital 01/2024")

    assert [candidate.id for candidate in candidates] == [NOTICE_01.id, NOTICE_02.id]
    assert [candidate.score for candidate in candidates] == [0, 1]


def test_search_returns_nothing_when_nothing_resembles(
    reference_matcher: RapidFuzzMatcher,
) -> None:
    assert reference_matcher.rank(ReferenceDomain.DEPARTMENT, "Zzzzzzzzzzzz") == []


@pytest.mark.parametrize("query", ["-/-", "???", " . "])
def test_punctuation_only_query_matches_nothing(query: str) -> None:
    short = CanonicalEntity(id="LOT-TI", display_name="TI", domain=ReferenceDomain.DEPARTMENT)
    matcher = RapidFuzzMatcher([short])

    assert matcher.rank(ReferenceDomain.DEPARTMENT, query) == []


def test_search_is_scoped_to_domain(reference_matcher: RapidFuzzMatcher) -> None:
    assert reference_matcher.rank(ReferenceDomain.DEPARTMENT, "Analista") == []


def test_search_on_empty_domain_returns_nothing() -> None:
    matcher = RapidFuzzMatcher([ANALYST])

    assert matcher.rank(ReferenceDomain.NOTICE, "Edital 01/2024") == []


def test_search_respects_limit_and_breaks_ties_by_name() -> None:
    entities = [
        CanonicalEntity(id=f"LOT-{index}", display_name=name, domain=ReferenceDomain.DEPARTMENT)
        for index, name in enumerate(["Setor C", "Setor B", "Setor A", "Setor D"])
    ]
    matcher = RapidFuzzMatcher(entities, limit=2)

    candidates = matcher.rank(ReferenceDomain.DEPARTMENT, "Setor X")

    assert [candidate.display_name for candidate in candidates] == ["Setor A", "Setor B"]
    assert {candidate.score for candidate in candidates} == {1}


def test_max_distance_bounds_reported_candidates() -> None:
    matcher = RapidFuzzMatcher([ANALYST], max_distance=1)

    assert matcher.rank(ReferenceDomain.POSITION, "Anlsta") == []
    assert len(matcher.rank(ReferenceDomain.POSITION, "Anlista")) == 1


def test_len_counts_indexed_entities(reference_matcher: RapidFuzzMatcher) -> None:
    assert len(reference_matcher) == len(REFERENCE_ENTITIES)


@pytest.mark.parametrize(("max_distance", "limit"), [(-1, 5), (2, 0)])
def test_invalid_bounds_are_rejected(max_distance: int, limit: int) -> None:
    with pytest.raises(ValueError):
        RapidFuzzMatcher(max_distance=max_distance, limit=limit)
