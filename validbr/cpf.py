"""CPF — Cadastro de Pessoas Físicas, the individual taxpayer registry.

A CPF is 9 base digits and 2 check digits, written ``NNN.NNN.NNN-NN`` or as
11 plain digits. Cpf values exist only with a valid checksum: create() and
parse() return Ok | Err, and direct construction re-checks in __post_init__.

Numbers made of a single repeated digit (000.000.000-00, 111.111.111-11, ...)
satisfy the arithmetic but are never issued; they are rejected as an invalid
checksum with rule ``repeated_digits``.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import final

from validbr._validation import check_digits_match, check_group
from validbr.checksum import individual_check_digits
from validbr.core.digits import DigitSequence, compose, render
from validbr.core.errors import REPEATED_DIGITS_RULE, InvalidChecksumError, RegistryError
from validbr.core.formats import CPF_FORMAT
from validbr.core.result import Err, Ok
from validbr.recognizer import extract

_NAME = CPF_FORMAT.name

type _Groups = tuple[DigitSequence, DigitSequence]


def _check_issued(groups: _Groups, source: str) -> Ok[_Groups] | Err[RegistryError]:
    base, check = groups
    expected = individual_check_digits(base)
    if len({*base, *check}) == 1:
        return Err(InvalidChecksumError.of(
            _NAME, expected, check, source, rule=REPEATED_DIGITS_RULE,
        ))
    return check_digits_match(_NAME, expected, check, source).map(lambda _: groups)


def _validate(
    base: Iterable[object], check: Iterable[object], source: str,
) -> Ok[_Groups] | Err[RegistryError]:
    return (
        check_group(_NAME, "base", base, 9, source)
        .bind(lambda b: check_group(_NAME, "check", check, 2, source).map(lambda c: (b, c)))
        .bind(lambda groups: _check_issued(groups, source))
    )


@final
@dataclass(frozen=True, slots=True)
class Cpf:
    """Checksum-valid CPF: 9 base digits + 2 check digits."""

    base: DigitSequence
    check: DigitSequence

    def __post_init__(self) -> None:
        if not isinstance(self.base, tuple) or not isinstance(self.check, tuple):
            raise TypeError("Cpf digit groups must be tuples, use Cpf.create()")
        match _validate(self.base, self.check, "Cpf.__post_init__"):
            case Err(e):
                raise TypeError(f"Cpf: {e.message}")
            case Ok(_):
                pass

    @staticmethod
    def create(base: Iterable[int], check: Iterable[int]) -> Ok[Cpf] | Err[RegistryError]:
        """Build a Cpf from its digit groups.

        Errors: CouldNotConvertToDigitsError (wrong group size),
        DigitsOutOfBoundsError (value not in 0..9), InvalidChecksumError.
        """
        return _validate(base, check, "Cpf.create").map(lambda g: Cpf(base=g[0], check=g[1]))

    @staticmethod
    def parse(text: str) -> Ok[Cpf] | Err[RegistryError]:
        """Parse ``NNN.NNN.NNN-NN`` or 11 plain digits."""
        match extract(text, CPF_FORMAT):
            case Err() as e:
                return e
            case Ok((base, check)):
                return Cpf.create(base, check)

    @staticmethod
    def from_base(base: Iterable[int]) -> Ok[Cpf] | Err[RegistryError]:
        """Complete a 9-digit base with its computed check digits."""
        return check_group(_NAME, "base", base, 9, "Cpf.from_base").bind(
            lambda b: Cpf.create(b, individual_check_digits(b)),
        )

    @property
    def digits(self) -> DigitSequence:
        """All 11 digits, check digits last."""
        return compose(self.base, self.check, 11)

    def digits_only(self) -> str:
        return render(self.digits)

    def __str__(self) -> str:
        return CPF_FORMAT.punctuate(self.digits_only())


def individual_from_digits(
    base: Iterable[int], check: Iterable[int],
) -> Ok[Cpf] | Err[RegistryError]:
    return Cpf.create(base, check)


def individual_from_text(text: str) -> Ok[Cpf] | Err[RegistryError]:
    return Cpf.parse(text)
