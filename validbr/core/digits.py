"""Fixed-length digit sequences.

A DigitSequence is a tuple of ints in 0..9. Sizes are fixed by the registry
(9/2 for CPF, 8/4/2 for CNPJ); compose() and append() join sequences at those
fixed call sites and assert the resulting size. A failed assertion is a bug in
validbr, not bad input.
"""

from __future__ import annotations

from collections.abc import Sequence

type DigitSequence = tuple[int, ...]

ASCII_DIGITS = "0123456789"


def compose(head: DigitSequence, tail: DigitSequence, size: int) -> DigitSequence:
    """Concatenate head and tail, asserting the result has exactly size digits."""
    joined = (*head, *tail)
    assert len(joined) == size, f"composed {len(joined)} digits, expected {size}"
    return joined


def append(head: DigitSequence, digit: int, size: int) -> DigitSequence:
    """One-element form of compose()."""
    return compose(head, (digit,), size)


def is_digit(value: object) -> bool:
    # bool is a subclass of int
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= 9


def all_digits(values: Sequence[object]) -> bool:
    return all(is_digit(v) for v in values)


def to_digits(text: str) -> DigitSequence | None:
    """Convert a string of ASCII digits to a DigitSequence, None if any char is not 0-9."""
    values: list[int] = []
    for c in text:
        index = ASCII_DIGITS.find(c)
        if index < 0:
            return None
        values.append(index)
    return tuple(values)


def from_number(number: int, width: int) -> DigitSequence:
    """Zero-padded decimal digits of a non-negative number, most significant first."""
    values = [0] * width
    for i in range(width - 1, -1, -1):
        number, values[i] = divmod(number, 10)
    return tuple(values)


def to_number(digits: DigitSequence) -> int:
    total = 0
    for d in digits:
        total = total * 10 + d
    return total


def render(digits: DigitSequence) -> str:
    return "".join(ASCII_DIGITS[d] for d in digits)
