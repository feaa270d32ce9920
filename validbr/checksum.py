"""Modulo-11 check digit computation for CPF and CNPJ.

Two families, both a weighted digit sum reduced modulo 11:

CPF:  weights descend from len+1 to 2; d = (sum * 10) % 11, and 10 maps to 0.
CNPJ: weights cycle 2..9 from the right (last weight is always 2);
      r = sum % 11, and d = 0 if r < 2 else 11 - r.

The first check digit is computed over the base digits, the second over the
base digits followed by the first check digit.
"""

from __future__ import annotations

from itertools import cycle, islice

from validbr.core.digits import DigitSequence, append, compose

_CNPJ_WEIGHT_CYCLE: tuple[int, ...] = (2, 3, 4, 5, 6, 7, 8, 9)


# ---------------------------------------------------------------------------
# CPF
# ---------------------------------------------------------------------------


def individual_check_digit(digits: DigitSequence) -> int:
    """One CPF check digit for any number of leading digits.

    >>> individual_check_digit((4, 1, 4, 9, 0, 4, 2, 5, 7))
    8
    """
    top = len(digits) + 1
    total = sum(d * (top - pos) for pos, d in enumerate(digits))
    pre = (total * 10) % 11
    return 0 if pre == 10 else pre


def individual_check_digits(base: DigitSequence) -> tuple[int, int]:
    """Both CPF check digits for a 9-digit base."""
    assert len(base) == 9, f"CPF base must have 9 digits, got {len(base)}"
    first = individual_check_digit(base)
    second = individual_check_digit(append(base, first, 10))
    return first, second


# ---------------------------------------------------------------------------
# CNPJ
# ---------------------------------------------------------------------------


def entity_weights(amount: int) -> tuple[int, ...]:
    """CNPJ weights for amount digits, most significant position first.

    >>> entity_weights(12)
    (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
    """
    return tuple(reversed(tuple(islice(cycle(_CNPJ_WEIGHT_CYCLE), amount))))


def entity_check_digit(digits: DigitSequence) -> int:
    """One CNPJ check digit for any number of leading digits."""
    weights = entity_weights(len(digits))
    pre = sum(d * w for d, w in zip(digits, weights, strict=True)) % 11
    return 0 if pre < 2 else 11 - pre


def entity_check_digits(base: DigitSequence, branch: DigitSequence) -> tuple[int, int]:
    """Both CNPJ check digits for an 8-digit base and a 4-digit branch."""
    digits = compose(base, branch, 12)
    first = entity_check_digit(digits)
    second = entity_check_digit(append(digits, first, 13))
    return first, second
