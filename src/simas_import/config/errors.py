"""Errors raised while reading settings."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """A setting is present but cannot be used."""
