"""Raw import rows and the strict flag parsing applied to them."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TypeAlias

ImportRow: TypeAlias = Mapping[str, object]
"""One denormalized input row, keyed by field name. Lives for a single import call."""

TRUE_FLAG_VALUES = frozenset({"true", "1"})


def parse_flag(value: object) -> bool:
    """Only the string literals ``"true"`` and ``"1"`` count as set."""

    return isinstance(value, str) and value in TRUE_FLAG_VALUES
