"""CNPJ — Cadastro Nacional da Pessoa Jurídica, the legal-entity registry.

A CNPJ is 8 base digits, 4 branch digits and 2 check digits, written
``NN.NNN.NNN/NNNN-NN`` or as 14 plain digits. The branch identifies a
registration unit of the same entity; 0001 is the head office.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar, final

from validbr._validation import check_digits_match, check_group
from validbr.checksum import entity_check_digits
from validbr.core.digits import DigitSequence, all_digits, compose, from_number, render, to_number
from validbr.core.errors import InvalidBranchNumberError, RegistryError
from validbr.core.formats import BRANCH_MAX, CNPJ_FORMAT, FIRST_BRANCH
from validbr.core.result import Err, Ok, sequence
from validbr.recognizer import extract

_NAME = CNPJ_FORMAT.name


# ---------------------------------------------------------------------------
# Branch
# ---------------------------------------------------------------------------


@final
@dataclass(frozen=True, slots=True)
class Branch:
    """Four-digit CNPJ branch number, 0000..9999."""

    digits: DigitSequence

    FIRST: ClassVar[Branch]  # Assigned after class definition

    def __post_init__(self) -> None:
        digits = self.digits
        if not isinstance(digits, tuple) or len(digits) != 4 or not all_digits(digits):
            raise TypeError(f"Branch requires 4 digits in 0..9, got {self.digits!r}")

    @staticmethod
    def create(digits: Iterable[int]) -> Ok[Branch] | Err[RegistryError]:
        """Build a Branch from 4 digits, each in 0..9."""
        try:
            items = tuple(digits)
        except TypeError:
            return Err(InvalidBranchNumberError.of(digits, "Branch.create"))
        if len(items) != 4 or not all_digits(items):
            return Err(InvalidBranchNumberError.of(items, "Branch.create"))
        return Ok(Branch(digits=items))

    @staticmethod
    def from_number(number: int) -> Ok[Branch] | Err[RegistryError]:
        """Zero-padded branch for a number in 0..9999: 12 -> 0012."""
        if isinstance(number, bool) or not isinstance(number, int):
            return Err(InvalidBranchNumberError.of(number, "Branch.from_number"))
        if not 0 <= number <= BRANCH_MAX:
            return Err(InvalidBranchNumberError.of(number, "Branch.from_number"))
        return Ok(Branch(digits=from_number(number, 4)))

    @staticmethod
    def first() -> Branch:
        """The head-office branch, 0001."""
        return Branch.FIRST

    @property
    def number(self) -> int:
        return to_number(self.digits)

    def __str__(self) -> str:
        return render(self.digits)


Branch.FIRST = Branch(digits=FIRST_BRANCH)


# ---------------------------------------------------------------------------
# Cnpj
# ---------------------------------------------------------------------------


type _Groups = tuple[DigitSequence, DigitSequence, DigitSequence]


def _validate(
    base: Iterable[object],
    branch: Iterable[object],
    check: Iterable[object],
    source: str,
) -> Ok[_Groups] | Err[RegistryError]:
    return (
        sequence(
            check_group(_NAME, field, values, size, source)
            for field, values, size in (
                ("base", base, 8), ("branch", branch, 4), ("check", check, 2),
            )
        )
        .map(tuple)
        .bind(lambda g: check_digits_match(
            _NAME, entity_check_digits(g[0], g[1]), g[2], source,
        ).map(lambda _: g))
    )


@final
@dataclass(frozen=True, slots=True)
class Cnpj:
    """Checksum-valid CNPJ: 8 base digits + 4 branch digits + 2 check digits."""

    base: DigitSequence
    branch: DigitSequence
    check: DigitSequence

    def __post_init__(self) -> None:
        if not all(isinstance(g, tuple) for g in (self.base, self.branch, self.check)):
            raise TypeError("Cnpj digit groups must be tuples, use Cnpj.create()")
        match _validate(self.base, self.branch, self.check, "Cnpj.__post_init__"):
            case Err(e):
                raise TypeError(f"Cnpj: {e.message}")
            case Ok(_):
                pass

    @staticmethod
    def create(
        base: Iterable[int],
        branch: Iterable[int] | Branch,
        check: Iterable[int],
    ) -> Ok[Cnpj] | Err[RegistryError]:
        """Build a Cnpj from its digit groups.

        Errors: CouldNotConvertToDigitsError (wrong group size),
        DigitsOutOfBoundsError (value not in 0..9), InvalidChecksumError.
        """
        if isinstance(branch, Branch):
            branch = branch.digits
        return _validate(base, branch, check, "Cnpj.create").map(
            lambda g: Cnpj(base=g[0], branch=g[1], check=g[2]),
        )

    @staticmethod
    def parse(text: str) -> Ok[Cnpj] | Err[RegistryError]:
        """Parse ``NN.NNN.NNN/NNNN-NN`` or 14 plain digits."""
        match extract(text, CNPJ_FORMAT):
            case Err() as e:
                return e
            case Ok((base, branch, check)):
                return Cnpj.create(base, branch, check)

    @staticmethod
    def from_base(
        base: Iterable[int], branch: Iterable[int] | Branch | None = None,
    ) -> Ok[Cnpj] | Err[RegistryError]:
        """Complete an 8-digit base and a branch (default 0001) with check digits."""
        if branch is None:
            branch = Branch.first()
        if isinstance(branch, Branch):
            branch = branch.digits
        source = "Cnpj.from_base"
        return sequence((
            check_group(_NAME, "base", base, 8, source),
            check_group(_NAME, "branch", branch, 4, source),
        )).bind(lambda g: Cnpj.create(g[0], g[1], entity_check_digits(g[0], g[1])))

    @property
    def branch_unit(self) -> Branch:
        return Branch(digits=self.branch)

    @property
    def digits(self) -> DigitSequence:
        """All 14 digits: base, branch, check."""
        return compose(compose(self.base, self.branch, 12), self.check, 14)

    def digits_only(self) -> str:
        return render(self.digits)

    def __str__(self) -> str:
        return CNPJ_FORMAT.punctuate(self.digits_only())


def entity_from_digits(
    base: Iterable[int], branch: Iterable[int] | Branch, check: Iterable[int],
) -> Ok[Cnpj] | Err[RegistryError]:
    return Cnpj.create(base, branch, check)


def entity_from_text(text: str) -> Ok[Cnpj] | Err[RegistryError]:
    return Cnpj.parse(text)


def branch_from_number(number: int) -> Ok[Branch] | Err[RegistryError]:
    return Branch.from_number(number)
