"""Root logger setup for the command line."""

from __future__ import annotations

import logging

from .errors import ConfigurationError

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_LEVEL_NAMES = ("debug", "info", "warning", "error")


def configure_logging(level: int | str = logging.INFO, *, force: bool = False) -> None:
    """Send records at ``level`` and above to stderr.

    ``level`` may be a level name in any case (``"debug"``). An unknown name raises
    ``ConfigurationError``.
    """

    if isinstance(level, str):
        resolved = logging.getLevelNamesMapping().get(level.strip().upper())
        if resolved is None:
            raise ConfigurationError(f"Unknown log level {level!r}")
        level = resolved
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%H:%M:%S", force=force)
