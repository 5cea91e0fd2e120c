"""
Randomness Capability
======================

The generator draws every random index through a :class:`RandomSource`.
Production code uses :class:`secrets.SystemRandom`, which reads the OS
entropy pool on every call and keeps no state between invocations; tests
inject a seeded :class:`random.Random` or a scripted source to assert
exact output sequences.
"""

from __future__ import annotations

import secrets
from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """Anything that can draw a uniform integer from ``range(n)``."""

    def randrange(self, stop: int) -> int: ...


def system_random() -> RandomSource:
    """Return a fresh OS-entropy backed random source."""
    return secrets.SystemRandom()
