"""
Sources of uniform randomness for qubit measurement.

Measurement never reaches for a global generator: callers pass a source
explicitly. Any object with a ``uniform() -> float`` method returning a
value in [0, 1) qualifies.

Usage:
    from tiny_qubit.random_source import NumpyRandomSource, SequenceRandomSource

    source = NumpyRandomSource(seed=42)      # reproducible pseudo-random draws
    replay = SequenceRandomSource([0.1, 0.9])  # fixed draws, e.g. for tests
"""

from __future__ import annotations

from typing import Iterable, Optional, Protocol, runtime_checkable

import numpy as np

from tiny_qubit.errors import RandomSourceExhausted


@runtime_checkable
class RandomSource(Protocol):
    """Capability providing independent uniform draws in [0, 1)."""

    def uniform(self) -> float:
        ...


class NumpyRandomSource:
    """
    Uniform draws from a numpy ``Generator``.

    Parameters
    ----------
    seed : int | None
        Seed for ``numpy.random.default_rng``. None draws fresh entropy.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def uniform(self) -> float:
        return float(self._rng.random())

    def __repr__(self) -> str:
        return f"NumpyRandomSource(seed={self.seed})"


class SequenceRandomSource:
    """
    Replays a fixed list of draws in order.

    Raises
    ------
    ValueError
        If any draw lies outside [0, 1).
    RandomSourceExhausted
        When ``uniform`` is called after the last draw was consumed.
    """

    def __init__(self, draws: Iterable[float]) -> None:
        self._draws = [float(r) for r in draws]
        for r in self._draws:
            if not 0.0 <= r < 1.0:
                raise ValueError(f"Draw must be in [0, 1), got {r}")
        self._index = 0

    @property
    def remaining(self) -> int:
        return len(self._draws) - self._index

    def uniform(self) -> float:
        if self._index >= len(self._draws):
            raise RandomSourceExhausted(
                f"All {len(self._draws)} draw(s) have been consumed"
            )
        r = self._draws[self._index]
        self._index += 1
        return r

    def __repr__(self) -> str:
        return f"SequenceRandomSource(remaining={self.remaining})"
