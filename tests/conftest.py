"""Shared fixtures for the Keysmith test suite."""

from __future__ import annotations

import random
from typing import Iterable

import pytest

from shared.config import GeneratorConfig


class ScriptedRandom:
    """Random source that replays a fixed list of indices."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        self.calls: list[int] = []

    def randrange(self, stop: int) -> int:
        value = self._values[len(self.calls)]
        assert 0 <= value < stop, f"scripted value {value} outside range({stop})"
        self.calls.append(stop)
        return value


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def notices() -> list[str]:
    return []


@pytest.fixture
def tiny_config() -> GeneratorConfig:
    """Small alphabets so exact outputs are easy to reason about."""
    return GeneratorConfig(
        min_length=1,
        max_length=10,
        default_length=4,
        lowercase="ab",
        uppercase="CD",
        special="!",
        digits="9",
    )
