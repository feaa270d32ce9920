"""DigitSource adapters backed by the standard library.

RandomDigitSource wraps random.Random, seedable for reproducible output.
SequenceDigitSource replays fixed digits; it is a test double, not production code.
"""

from __future__ import annotations

import random
from collections.abc import Iterable
from typing import final


@final
class RandomDigitSource:
    """Uniform digits from a random.Random instance."""

    def __init__(self, rng: random.Random | None = None, *, seed: int | None = None) -> None:
        if rng is not None and seed is not None:
            raise TypeError("RandomDigitSource takes either rng or seed, not both")
        self._rng = rng if rng is not None else random.Random(seed)

    def digits(self, count: int) -> tuple[int, ...]:
        return tuple(self._rng.randint(0, 9) for _ in range(count))


@final
class SequenceDigitSource:
    """Replays the given digits in order, cycling when exhausted."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = tuple(values)
        if not self._values:
            raise TypeError("SequenceDigitSource requires at least one digit")
        if any(not 0 <= v <= 9 for v in self._values):
            raise TypeError(f"SequenceDigitSource digits must be in 0..9, got {self._values}")
        self._position = 0

    def digits(self, count: int) -> tuple[int, ...]:
        out = []
        for _ in range(count):
            out.append(self._values[self._position % len(self._values)])
            self._position += 1
        return tuple(out)
