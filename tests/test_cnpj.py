"""Tests for validbr.cnpj — Cnpj values and the Branch helper."""

from __future__ import annotations

import dataclasses

import pytest
from hypothesis import given
from hypothesis import strategies as st

from tests.strategies import (
    branch_digits,
    branches,
    cnpj_bases,
    cnpjs,
    digit_sequences,
    registry_like_text,
)
from validbr.checksum import entity_check_digits
from validbr.cnpj import (
    Branch,
    Cnpj,
    branch_from_number,
    entity_from_digits,
    entity_from_text,
)
from validbr.core.errors import (
    CouldNotConvertToDigitsError,
    DigitsOutOfBoundsError,
    InvalidBranchNumberError,
    InvalidChecksumError,
    InvalidFormatError,
    ShortStringError,
)
from validbr.core.result import Err, Ok, unwrap

# ---------------------------------------------------------------------------
# Branch
# ---------------------------------------------------------------------------


class TestBranch:
    def test_from_number_pads(self) -> None:
        assert unwrap(Branch.from_number(12)).digits == (0, 0, 1, 2)

    def test_from_number_bounds(self) -> None:
        assert unwrap(Branch.from_number(0)).digits == (0, 0, 0, 0)
        assert unwrap(Branch.from_number(9999)).digits == (9, 9, 9, 9)

    @pytest.mark.parametrize("n", [10000, 65535, -1])
    def test_from_number_out_of_range(self, n: int) -> None:
        result = Branch.from_number(n)
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidBranchNumberError)

    @pytest.mark.parametrize("n", ["12", 1.0, True, None])
    def test_from_number_non_int(self, n: object) -> None:
        result = Branch.from_number(n)  # type: ignore[arg-type]
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidBranchNumberError)

    def test_first(self) -> None:
        assert Branch.first().digits == (0, 0, 0, 1)
        assert Branch.first() == unwrap(Branch.from_number(1))

    def test_create(self) -> None:
        assert unwrap(Branch.create([0, 0, 0, 4])).number == 4

    @pytest.mark.parametrize("digits", [[0, 0, 0, 10], [0, 0, 1], [0, 0, 0, 0, 1]])
    def test_create_rejects(self, digits: list[int]) -> None:
        result = Branch.create(digits)
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidBranchNumberError)

    def test_str(self) -> None:
        assert str(unwrap(Branch.from_number(42))) == "0042"

    def test_direct_construction_rechecks(self) -> None:
        with pytest.raises(TypeError):
            Branch(digits=(0, 0, 10, 0))

    @given(st.integers(min_value=0, max_value=9999))
    def test_number_round_trip(self, n: int) -> None:
        assert unwrap(Branch.from_number(n)).number == n

    def test_branch_from_number_surface(self) -> None:
        assert unwrap(branch_from_number(9999)).digits == (9, 9, 9, 9)
        assert isinstance(branch_from_number(10000), Err)


# ---------------------------------------------------------------------------
# create
# ---------------------------------------------------------------------------


class TestCreate:
    def test_valid(self) -> None:
        cnpj = unwrap(Cnpj.create([5, 3, 8, 7, 1, 1, 4, 3], [0, 0, 0, 1], [3, 5]))
        assert cnpj.base == (5, 3, 8, 7, 1, 1, 4, 3)
        assert cnpj.branch == (0, 0, 0, 1)
        assert cnpj.check == (3, 5)

    def test_accepts_branch_value(self) -> None:
        cnpj = unwrap(Cnpj.create([5, 3, 8, 7, 1, 1, 4, 3], Branch.first(), [3, 5]))
        assert cnpj.branch_unit == Branch.first()

    def test_wrong_check_digits(self) -> None:
        result = Cnpj.create([8, 0, 9, 0, 6, 4, 0, 4], [0, 0, 0, 3], [8, 8])
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidChecksumError)

    @pytest.mark.parametrize(
        ("base", "branch", "check", "field"),
        [
            ([5, 3, 8, 7, 1, 1, 4, 30], [0, 0, 0, 1], [3, 5], "base"),
            ([5, 3, 8, 7, 1, 1, 4, 3], [0, 0, 0, 11], [3, 5], "branch"),
            ([5, 3, 8, 7, 1, 1, 4, 3], [0, 0, 0, 1], [3, 15], "check"),
        ],
    )
    def test_digits_out_of_bounds(
        self, base: list[int], branch: list[int], check: list[int], field: str,
    ) -> None:
        result = Cnpj.create(base, branch, check)
        assert isinstance(result, Err)
        assert isinstance(result.error, DigitsOutOfBoundsError)
        assert result.error.field == field

    def test_wrong_group_size(self) -> None:
        result = Cnpj.create([5, 3, 8, 7, 1, 1, 4, 3], [0, 1], [3, 5])
        assert isinstance(result, Err)
        assert isinstance(result.error, CouldNotConvertToDigitsError)

    @given(cnpj_bases(), branch_digits(), digit_sequences(2))
    def test_succeeds_iff_check_matches(
        self,
        base: tuple[int, ...],
        branch: tuple[int, ...],
        check: tuple[int, ...],
    ) -> None:
        result = Cnpj.create(base, branch, check)
        if check == entity_check_digits(base, branch):
            assert isinstance(result, Ok)
        else:
            assert isinstance(result, Err)
            assert isinstance(result.error, InvalidChecksumError)

    @given(cnpj_bases(), branch_digits())
    def test_computed_check_always_valid(
        self, base: tuple[int, ...], branch: tuple[int, ...],
    ) -> None:
        assert isinstance(Cnpj.create(base, branch, entity_check_digits(base, branch)), Ok)


class TestFromBase:
    def test_default_branch_is_first(self) -> None:
        cnpj = unwrap(Cnpj.from_base([5, 3, 8, 7, 1, 1, 4, 3]))
        assert cnpj.branch == (0, 0, 0, 1)
        assert cnpj.check == (3, 5)

    @given(cnpj_bases(), branches())
    def test_pinned_branch_kept(self, base: tuple[int, ...], branch: Branch) -> None:
        assert unwrap(Cnpj.from_base(base, branch)).branch_unit == branch

    def test_rejects_short_base(self) -> None:
        result = Cnpj.from_base([1, 2, 3])
        assert isinstance(result, Err)
        assert isinstance(result.error, CouldNotConvertToDigitsError)

    def test_branch_as_digits(self) -> None:
        cnpj = unwrap(Cnpj.from_base([5, 3, 8, 7, 1, 1, 4, 3], (0, 0, 0, 1)))
        assert cnpj == unwrap(Cnpj.parse("53.871.143/0001-35"))

    @given(cnpj_bases(), branch_digits())
    def test_branch_digits_match_branch_value(
        self, base: tuple[int, ...], branch: tuple[int, ...],
    ) -> None:
        assert Cnpj.from_base(base, list(branch)) == Cnpj.from_base(
            base, unwrap(Branch.create(branch)),
        )

    def test_rejects_short_branch(self) -> None:
        result = Cnpj.from_base([5, 3, 8, 7, 1, 1, 4, 3], (0, 1))
        assert isinstance(result, Err)
        assert isinstance(result.error, CouldNotConvertToDigitsError)

    def test_rejects_branch_out_of_bounds(self) -> None:
        result = Cnpj.from_base([5, 3, 8, 7, 1, 1, 4, 3], [0, 0, 0, 12])
        assert isinstance(result, Err)
        assert isinstance(result.error, DigitsOutOfBoundsError)
        assert result.error.field == "branch"


# ---------------------------------------------------------------------------
# parse
# ---------------------------------------------------------------------------


class TestParse:
    def test_punctuated(self) -> None:
        assert unwrap(Cnpj.parse("53.871.143/0001-35")) == Cnpj(
            base=(5, 3, 8, 7, 1, 1, 4, 3), branch=(0, 0, 0, 1), check=(3, 5),
        )

    def test_digits_only(self) -> None:
        assert Cnpj.parse("53871143000135") == Cnpj.parse("53.871.143/0001-35")

    @pytest.mark.parametrize("text", ["12.345.678/0001-95", "80.906.404/0001-88"])
    def test_known_valid(self, text: str) -> None:
        assert isinstance(Cnpj.parse(text), Ok)

    def test_wrong_check(self) -> None:
        result = Cnpj.parse("53.871.143/0001-36")
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidChecksumError)

    def test_short_string(self) -> None:
        result = Cnpj.parse("5387114300013")
        assert isinstance(result, Err)
        assert isinstance(result.error, ShortStringError)

    def test_invalid_format(self) -> None:
        result = Cnpj.parse("53.871.143.0001.35")
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidFormatError)


# ---------------------------------------------------------------------------
# value semantics and rendering
# ---------------------------------------------------------------------------


class TestValue:
    def test_frozen(self) -> None:
        cnpj = unwrap(Cnpj.parse("53.871.143/0001-35"))
        with pytest.raises(dataclasses.FrozenInstanceError):
            cnpj.branch = (0, 0, 0, 2)  # type: ignore[misc]

    def test_direct_construction_rechecks(self) -> None:
        with pytest.raises(TypeError, match="Cnpj"):
            Cnpj(base=(5, 3, 8, 7, 1, 1, 4, 3), branch=(0, 0, 0, 2), check=(3, 5))

    def test_str(self) -> None:
        assert str(unwrap(Cnpj.parse("80906404000188"))) == "80.906.404/0001-88"

    def test_digits_only(self) -> None:
        assert unwrap(Cnpj.parse("80.906.404/0001-88")).digits_only() == "80906404000188"

    @given(cnpjs())
    def test_round_trip_punctuated(self, cnpj: Cnpj) -> None:
        assert Cnpj.parse(str(cnpj)) == Ok(cnpj)

    @given(cnpjs())
    def test_round_trip_digits_only(self, cnpj: Cnpj) -> None:
        assert Cnpj.parse(cnpj.digits_only()) == Ok(cnpj)


class TestSurfaceFunctions:
    def test_entity_from_text(self) -> None:
        cnpj = unwrap(entity_from_text("53.871.143/0001-35"))
        assert cnpj.base == (5, 3, 8, 7, 1, 1, 4, 3)
        assert cnpj.branch == (0, 0, 0, 1)
        assert cnpj.check == (3, 5)

    def test_entity_from_digits(self) -> None:
        assert entity_from_digits(
            [1, 2, 3, 4, 5, 6, 7, 8], [9, 0, 1, 2], [3, 0],
        ) == Cnpj.parse("12.345.678/9012-30")

    @given(registry_like_text())
    def test_never_raises(self, text: str) -> None:
        assert isinstance(entity_from_text(text), Ok | Err)
        assert Cnpj.parse(text) == entity_from_text(text)

    @pytest.mark.parametrize("text", ["٥٣.٨٧١.١٤٣/٠٠٠١-٣٥", "53.871.143/0001-3٥"])
    def test_non_ascii_digits_rejected(self, text: str) -> None:
        result = entity_from_text(text)
        assert isinstance(result, Err)
        assert isinstance(result.error, CouldNotConvertToDigitsError)
