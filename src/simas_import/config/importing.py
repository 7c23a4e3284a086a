"""Tuning values for the relational row import."""

from __future__ import annotations

from dataclasses import dataclass

from simas_import.domain.audit import AUDIT_ID_PREFIX
from simas_import.domain.importer import VACANCY_ID_PREFIX
from simas_import.domain.resolution import DEFAULT_MATCH_THRESHOLD

from .env import env_int
from .errors import ConfigurationError

DEFAULT_MAX_DISTANCE = 5
DEFAULT_CANDIDATE_LIMIT = 5


@dataclass(frozen=True, slots=True)
class ImportConfig:
    """Thresholds used when resolving typed names against reference tables.

    ``match_threshold`` is the highest edit distance still resolved automatically.
    ``max_distance`` bounds what the matcher reports at all; anything farther away
    counts as "no candidate".
    """

    match_threshold: int = DEFAULT_MATCH_THRESHOLD
    max_distance: int = DEFAULT_MAX_DISTANCE
    candidate_limit: int = DEFAULT_CANDIDATE_LIMIT
    vacancy_prefix: str = VACANCY_ID_PREFIX
    audit_prefix: str = AUDIT_ID_PREFIX

    def __post_init__(self) -> None:
        if self.max_distance < self.match_threshold:
            raise ConfigurationError(
                "max_distance must not be smaller than match_threshold "
                f"({self.max_distance} < {self.match_threshold})"
            )
        if self.candidate_limit < 1:
            raise ConfigurationError("candidate_limit must be at least 1")


def get_import_config() -> ImportConfig:
    return ImportConfig(
        match_threshold=env_int("SIMAS_MATCH_THRESHOLD", DEFAULT_MATCH_THRESHOLD),
        max_distance=env_int("SIMAS_MAX_DISTANCE", DEFAULT_MAX_DISTANCE),
        candidate_limit=env_int("SIMAS_CANDIDATE_LIMIT", DEFAULT_CANDIDATE_LIMIT, minimum=1),
    )
