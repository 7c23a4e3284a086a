"""Typed readers for optional environment variables."""

from __future__ import annotations

import os

from .errors import ConfigurationError


def env_int(name: str, default: int, *, minimum: int = 0) -> int:
    """Read an optional integer variable, falling back to ``default`` when unset or blank."""

    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc
    if value < minimum:
        raise ConfigurationError(f"{name} must be >= {minimum}, got {value}")
    return value
