"""Error values for registry construction — no constructor raises on bad input.

Every error is a frozen dataclass that can be pattern-matched, compared and
serialized. Base class RegistryError, six @final subclasses, one per failure
kind. Errors carry no timestamp: the same input always produces an equal error.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import final

INVALID_FORMAT = "INVALID_FORMAT"
SHORT_STRING = "SHORT_STRING"
DIGITS_OUT_OF_BOUNDS = "DIGITS_OUT_OF_BOUNDS"
COULD_NOT_CONVERT_TO_DIGITS = "COULD_NOT_CONVERT_TO_DIGITS"
INVALID_CHECKSUM = "INVALID_CHECKSUM"
INVALID_BRANCH_NUMBER = "INVALID_BRANCH_NUMBER"

# InvalidChecksumError.rule values
CHECK_DIGITS_RULE = "check_digits"
REPEATED_DIGITS_RULE = "repeated_digits"


@dataclass(frozen=True, slots=True)
class RegistryError:
    """Base error value. NOT @final — has subclasses."""

    message: str
    code: str
    source: str  # "module.function" that produced this error

    def with_context(self, context: str) -> RegistryError:
        """Return a copy with context prepended to message."""
        return replace(self, message=f"{context}: {self.message}")

    def to_dict(self) -> dict[str, object]:
        return {
            "message": self.message,
            "code": self.code,
            "source": self.source,
        }


@final
@dataclass(frozen=True, slots=True)
class InvalidFormatError(RegistryError):
    """Text matches neither the digits-only nor the punctuated shape."""

    registry: str
    raw: str

    @staticmethod
    def of(registry: str, raw: str, source: str) -> InvalidFormatError:
        return InvalidFormatError(
            message=f"{registry} text is not in a supported format: {raw!r}",
            code=INVALID_FORMAT,
            source=source,
            registry=registry,
            raw=raw,
        )

    def to_dict(self) -> dict[str, object]:
        return {**RegistryError.to_dict(self), "registry": self.registry, "raw": self.raw}


@final
@dataclass(frozen=True, slots=True)
class ShortStringError(RegistryError):
    """Text is made only of digits but has the wrong length."""

    registry: str
    expected_length: int
    actual_length: int

    @staticmethod
    def of(registry: str, expected: int, actual: int, source: str) -> ShortStringError:
        return ShortStringError(
            message=f"{registry} must have {expected} digits, got {actual}",
            code=SHORT_STRING,
            source=source,
            registry=registry,
            expected_length=expected,
            actual_length=actual,
        )

    def to_dict(self) -> dict[str, object]:
        return {
            **RegistryError.to_dict(self),
            "registry": self.registry,
            "expected_length": self.expected_length,
            "actual_length": self.actual_length,
        }


@final
@dataclass(frozen=True, slots=True)
class DigitsOutOfBoundsError(RegistryError):
    """A supplied digit is not an integer in 0..9."""

    registry: str
    field: str  # "base", "branch" or "check"
    values: tuple[object, ...]

    @staticmethod
    def of(
        registry: str, field: str, values: tuple[object, ...], source: str,
    ) -> DigitsOutOfBoundsError:
        return DigitsOutOfBoundsError(
            message=f"{registry} {field} digits must be integers in 0..9, got {list(values)}",
            code=DIGITS_OUT_OF_BOUNDS,
            source=source,
            registry=registry,
            field=field,
            values=values,
        )

    def to_dict(self) -> dict[str, object]:
        return {
            **RegistryError.to_dict(self),
            "registry": self.registry,
            "field": self.field,
            "values": [repr(v) for v in self.values],
        }


@final
@dataclass(frozen=True, slots=True)
class CouldNotConvertToDigitsError(RegistryError):
    """A fragment could not be turned into a fixed-size digit sequence."""

    registry: str
    fragment: str

    @staticmethod
    def of(registry: str, fragment: str, reason: str, source: str) -> CouldNotConvertToDigitsError:
        return CouldNotConvertToDigitsError(
            message=f"{registry} fragment {fragment!r} {reason}",
            code=COULD_NOT_CONVERT_TO_DIGITS,
            source=source,
            registry=registry,
            fragment=fragment,
        )

    def to_dict(self) -> dict[str, object]:
        return {**RegistryError.to_dict(self), "registry": self.registry, "fragment": self.fragment}


@final
@dataclass(frozen=True, slots=True)
class InvalidChecksumError(RegistryError):
    """Check digits rejected: they differ from the computed ones, or the
    whole number is one repeated digit (CPF only, never issued)."""

    registry: str
    expected: tuple[int, ...]
    actual: tuple[int, ...]
    rule: str

    @staticmethod
    def of(
        registry: str,
        expected: tuple[int, ...],
        actual: tuple[int, ...],
        source: str,
        rule: str = CHECK_DIGITS_RULE,
    ) -> InvalidChecksumError:
        if rule == REPEATED_DIGITS_RULE:
            detail = "made of a single repeated digit is never issued"
        else:
            detail = (
                f"check digits {''.join(map(str, actual))} do not match "
                f"computed {''.join(map(str, expected))}"
            )
        return InvalidChecksumError(
            message=f"{registry} {detail}",
            code=INVALID_CHECKSUM,
            source=source,
            registry=registry,
            expected=expected,
            actual=actual,
            rule=rule,
        )

    def to_dict(self) -> dict[str, object]:
        return {
            **RegistryError.to_dict(self),
            "registry": self.registry,
            "rule": self.rule,
            "expected": list(self.expected),
            "actual": list(self.actual),
        }


@final
@dataclass(frozen=True, slots=True)
class InvalidBranchNumberError(RegistryError):
    """Branch number is outside 0..9999."""

    value: str

    @staticmethod
    def of(value: object, source: str) -> InvalidBranchNumberError:
        return InvalidBranchNumberError(
            message=f"CNPJ branch must be a number in 0..9999, got {value!r}",
            code=INVALID_BRANCH_NUMBER,
            source=source,
            value=repr(value),
        )

    def to_dict(self) -> dict[str, object]:
        return {**RegistryError.to_dict(self), "value": self.value}
