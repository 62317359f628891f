"""Randomness sources for the roll evaluator.

A source is anything with a ``draw()`` returning a float in ``[0, 1)``.
Production code uses the OS entropy pool; tests replay a fixed cycle.
"""

from __future__ import annotations

import itertools
import secrets
from typing import Iterable, Protocol


class RandomSource(Protocol):
    name: str

    def draw(self) -> float: ...


class SystemSource:
    name = "secrets.SystemRandom"

    def __init__(self) -> None:
        self._rng = secrets.SystemRandom()

    def draw(self) -> float:
        return self._rng.random()


class CycleSource:
    """Replays ``values`` in order, wrapping around when exhausted."""

    name = "cycle"

    def __init__(self, values: Iterable[float]) -> None:
        values = list(values)
        if not values:
            raise ValueError("CycleSource needs at least one value")
        for v in values:
            if not 0.0 <= v < 1.0:
                raise ValueError(f"Draws must lie in [0, 1), got {v!r}")
        self._it = itertools.cycle(values)

    def draw(self) -> float:
        return next(self._it)
