"""Infrastructure protocol definitions.

The generator depends on DigitSource; adapters in this package implement it.
validbr owns no randomness of its own.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class DigitSource(Protocol):
    """Source of uniformly distributed decimal digits.

    Invariants:
      - digits(n) returns exactly n ints, each in 0..9.
      - each digit is drawn independently and uniformly.
    """

    def digits(self, count: int) -> tuple[int, ...]: ...
