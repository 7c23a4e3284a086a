"""Record identifier minting.

Identifiers look like ``VAG-0MGT3K9Q20003A1B2C3D4``: the domain tag, a dash, then a
fixed-width base36 millisecond timestamp, a per-process sequence number and 32
random bits. The sequence keeps ids from one process distinct without any lock
(``next`` on ``itertools.count`` is atomic in CPython); the random part keeps
separate processes apart.
"""

from __future__ import annotations

import itertools
import secrets
import string
import time
from typing import Final

_ALPHABET: Final[str] = string.digits + string.ascii_uppercase
_STAMP_WIDTH: Final[int] = 9
_SEQUENCE_WIDTH: Final[int] = 4

_sequence = itertools.count()


def _base36(value: int, width: int) -> str:
    digits: list[str] = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_ALPHABET[remainder])
    return "".join(reversed(digits)).rjust(width, "0")


def new_id(prefix: str) -> str:
    """Mint a new, never reused identifier tagged with ``prefix``."""

    if not prefix or not prefix.isalnum():
        raise ValueError(f"Identifier prefix must be alphanumeric, got {prefix!r}")
    stamp = _base36(time.time_ns() // 1_000_000, _STAMP_WIDTH)
    sequence = _base36(next(_sequence), _SEQUENCE_WIDTH)
    entropy = f"{secrets.randbits(32):08X}"
    return f"{prefix.upper()}-{stamp}{sequence}{entropy}"
