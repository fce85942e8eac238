"""Bill number generation backed by an injectable random source."""
from __future__ import annotations

import secrets
from typing import Protocol

from .constants import EMV

BILL_SUFFIX_DIGITS = 4


class RandomSource(Protocol):
    def randbelow(self, upper: int) -> int:
        """Return a random integer in ``[0, upper)``."""


class SystemRandomSource:
    """Random source backed by the OS CSPRNG."""

    def randbelow(self, upper: int) -> int:
        return secrets.randbelow(upper)


class FixedRandomSource:
    """Replays the given values in order, cycling when exhausted."""

    def __init__(self, *values: int):
        if not values:
            raise ValueError("FixedRandomSource needs at least one value")
        self._values = values
        self._index = 0

    def randbelow(self, upper: int) -> int:
        value = self._values[self._index % len(self._values)]
        self._index += 1
        return value % upper


def generate_bill_number(source: RandomSource | None = None) -> str:
    source = source or SystemRandomSource()
    suffix = source.randbelow(10**BILL_SUFFIX_DIGITS)
    return f"{EMV.bill_prefix}{suffix:0{BILL_SUFFIX_DIGITS}d}"
