"""Text recognition and digit extraction for registry identifiers.

extract(text, fmt) decides whether text is digits-only of the exact length or
contains the punctuated shape, strips every non-digit character and slices
what is left into the format's digit groups. No checksum logic here.
"""

from __future__ import annotations

from validbr.core.digits import DigitSequence, to_digits
from validbr.core.errors import (
    CouldNotConvertToDigitsError,
    InvalidFormatError,
    RegistryError,
    ShortStringError,
)
from validbr.core.formats import NOT_NUMBERS, ONLY_NUMBERS, RegistryFormat
from validbr.core.result import Err, Ok, sequence

_SOURCE = "recognizer.extract"


def is_digits_only(text: str) -> bool:
    return ONLY_NUMBERS.fullmatch(text) is not None


def matches_shape(text: str, fmt: RegistryFormat) -> bool:
    """True if text is digits-only of the exact length or contains the punctuated shape."""
    if is_digits_only(text) and len(text) == fmt.digits_length:
        return True
    return fmt.punctuated.search(text) is not None


def _slice_groups(digits: str, fmt: RegistryFormat) -> list[str]:
    """Cut digits into the format's groups; the last group takes the remainder."""
    fragments: list[str] = []
    start = 0
    for i, size in enumerate(fmt.group_sizes):
        last = i == len(fmt.group_sizes) - 1
        fragments.append(digits[start:] if last else digits[start:start + size])
        start += size
    return fragments


def _convert(
    fragment: str, size: int, fmt: RegistryFormat,
) -> Ok[DigitSequence] | Err[RegistryError]:
    values = to_digits(fragment)
    if values is None:
        return Err(CouldNotConvertToDigitsError.of(
            fmt.name, fragment, "contains characters that are not digits 0-9", _SOURCE,
        ))
    if len(values) != size:
        return Err(CouldNotConvertToDigitsError.of(
            fmt.name, fragment, f"must have {size} digits, got {len(values)}", _SOURCE,
        ))
    return Ok(values)


def extract(
    text: str, fmt: RegistryFormat,
) -> Ok[tuple[DigitSequence, ...]] | Err[RegistryError]:
    """Recognize text and return its digit groups in format order.

    Errors: ShortStringError (digits-only, wrong length), InvalidFormatError
    (no accepted shape), CouldNotConvertToDigitsError (groups not exact).
    """
    if is_digits_only(text) and len(text) != fmt.digits_length:
        return Err(ShortStringError.of(fmt.name, fmt.digits_length, len(text), _SOURCE))
    if not matches_shape(text, fmt):
        return Err(InvalidFormatError.of(fmt.name, text, _SOURCE))

    stripped = NOT_NUMBERS.sub("", text)
    fragments = _slice_groups(stripped, fmt)
    return sequence(
        _convert(fragment, size, fmt)
        for fragment, size in zip(fragments, fmt.group_sizes, strict=True)
    ).map(tuple)
