"""Shared validation helpers for the CPF and CNPJ constructors."""

from __future__ import annotations

from collections.abc import Iterable

from validbr.core.digits import DigitSequence, all_digits
from validbr.core.errors import (
    CouldNotConvertToDigitsError,
    DigitsOutOfBoundsError,
    InvalidChecksumError,
    RegistryError,
)
from validbr.core.result import Err, Ok


def check_group(
    registry: str,
    field: str,
    values: Iterable[object],
    size: int,
    source: str,
) -> Ok[DigitSequence] | Err[RegistryError]:
    """Validate one digit group: exact size, then every value in 0..9."""
    try:
        items = tuple(values)
    except TypeError:
        return Err(CouldNotConvertToDigitsError.of(
            registry, repr(values), f"{field} is not a sequence of digits", source,
        ))
    if len(items) != size:
        return Err(CouldNotConvertToDigitsError.of(
            registry, repr(items), f"{field} must have {size} digits, got {len(items)}", source,
        ))
    if not all_digits(items):
        return Err(DigitsOutOfBoundsError.of(registry, field, items, source))
    return Ok(tuple(int(v) for v in items))  # type: ignore[call-overload]


def check_digits_match(
    registry: str,
    expected: DigitSequence,
    actual: DigitSequence,
    source: str,
) -> Ok[DigitSequence] | Err[RegistryError]:
    if expected != actual:
        return Err(InvalidChecksumError.of(registry, expected, actual, source))
    return Ok(actual)
