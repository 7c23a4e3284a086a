from __future__ import annotations

import pytest

from simas_import.domain.errors import AmbiguityError, ConsistencyError, NotFoundError
from simas_import.domain.model import MatchCandidate
from simas_import.domain.resolution import rank_candidates, select_candidate


def test_select_candidate_returns_exact_match() -> None:
    candidates = [MatchCandidate(id="CAR-001", display_name="Analista", score=0)]

    assert select_candidate("position_name", "Analista", candidates) == "CAR-001"


def test_select_candidate_raises_not_found_for_empty_list() -> None:
    with pytest.raises(NotFoundError) as excinfo:
        select_candidate("position_name", "Astronauta", [])

    assert excinfo.value.field == "position_name"
    assert excinfo.value.query == "Astronauta"
    assert "Astronauta" in str(excinfo.value)


@pytest.mark.parametrize("score", [0, 1, 2])
def test_select_candidate_accepts_scores_up_to_threshold(score: int) -> None:
    candidates = [MatchCandidate(id="CAR-001", display_name="Analista", score=score)]

    assert select_candidate("position_name", "Anlista", candidates, threshold=2) == "CAR-001"


def test_select_candidate_rejects_score_above_threshold() -> None:
    candidates = [MatchCandidate(id="CAR-001", display_name="Analista", score=3)]

    with pytest.raises(AmbiguityError) as excinfo:
        select_candidate("position_name", "Anlst", candidates, threshold=2)

    assert excinfo.value.best_score == 3
    assert excinfo.value.threshold == 2
    assert excinfo.value.field == "position_name"


def test_select_candidate_uses_best_candidate_regardless_of_input_order() -> None:
    candidates = [
        MatchCandidate(id="CAR-009", display_name="Analista de Sistemas", score=4),
        MatchCandidate(id="CAR-001", display_name="Analista", score=1),
    ]

    assert select_candidate("position_name", "Anlista", candidates) == "CAR-001"


@pytest.mark.parametrize("missing_id", [None, ""])
def test_select_candidate_flags_candidate_without_identifier(missing_id: str | None) -> None:
    candidates = [MatchCandidate(id=missing_id, display_name="Analista", score=0)]

    with pytest.raises(ConsistencyError) as excinfo:
        select_candidate("position_name", "Analista", candidates)

    assert excinfo.value.field == "position_name"


def test_rank_candidates_breaks_ties_by_display_name() -> None:
    candidates = [
        MatchCandidate(id="LOT-009", display_name="Secretaria de Obras", score=2),
        MatchCandidate(id="LOT-003", display_name="secretaria de Esporte", score=2),
        MatchCandidate(id="LOT-004", display_name="Secretaria de Cultura", score=2),
    ]

    ranked = rank_candidates(candidates)

    assert [candidate.id for candidate in ranked] == ["LOT-004", "LOT-003", "LOT-009"]
    assert rank_candidates(reversed(candidates)) == ranked


def test_tie_break_is_deterministic_for_selection() -> None:
    first = MatchCandidate(id="EDT-002", display_name="Edital 02/2024", score=1)
    second = MatchCandidate(id="EDT-001", display_name="Edital 01/2024", score=1)

    assert select_candidate("notice_name", "Edital 0/2024", [first, second]) == "EDT-001"
    assert select_candidate("notice_name", "Edital 0/2024", [second, first]) == "EDT-001"
