"""Port for identifier allocation."""

from __future__ import annotations

from typing import Protocol


class IdentifierGenerator(Protocol):
    """Return a globally unique identifier tagged with ``prefix``."""

    def __call__(self, prefix: str, /) -> str: ...
