"""Application configuration helpers."""

from __future__ import annotations

from .env import env_int
from .errors import ConfigurationError
from .importing import (
    AUDIT_ID_PREFIX,
    DEFAULT_CANDIDATE_LIMIT,
    DEFAULT_MATCH_THRESHOLD,
    DEFAULT_MAX_DISTANCE,
    VACANCY_ID_PREFIX,
    ImportConfig,
    get_import_config,
)
from .logging import LOG_LEVEL_NAMES, configure_logging
from .storage import DatabaseConfig, StorageConfig, get_database_config, get_storage_config

__all__ = [
    "AUDIT_ID_PREFIX",
    "DEFAULT_CANDIDATE_LIMIT",
    "DEFAULT_MATCH_THRESHOLD",
    "DEFAULT_MAX_DISTANCE",
    "LOG_LEVEL_NAMES",
    "VACANCY_ID_PREFIX",
    "ConfigurationError",
    "DatabaseConfig",
    "ImportConfig",
    "StorageConfig",
    "configure_logging",
    "env_int",
    "get_database_config",
    "get_import_config",
    "get_storage_config",
]
