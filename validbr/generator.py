"""Random valid CPF and CNPJ values.

Digits come from an injected DigitSource; check digits are computed, never
drawn. A CNPJ can be pinned to a branch, otherwise the branch is drawn too.
"""

from __future__ import annotations

from validbr.cnpj import Branch, Cnpj
from validbr.core.errors import InvalidChecksumError
from validbr.core.result import Err, Ok
from validbr.cpf import Cpf
from validbr.infra.protocols import DigitSource

# Redraw bound for rejected CPF bases; only the ten repeated-digit bases are rejected.
_MAX_DRAWS = 1000


def random_cpf(source: DigitSource) -> Cpf:
    """Draw 9 base digits and complete them with their check digits."""
    for _ in range(_MAX_DRAWS):
        match Cpf.from_base(source.digits(9)):
            case Ok(cpf):
                return cpf
            case Err(InvalidChecksumError()):
                continue
            case Err(e):
                raise ValueError(f"DigitSource produced invalid CPF digits: {e.message}")
    raise RuntimeError(f"no issuable CPF after {_MAX_DRAWS} draws from {source!r}")


def random_cnpj(source: DigitSource, branch: Branch | None = None) -> Cnpj:
    """Draw 8 base digits (and 4 branch digits unless branch is given)."""
    base = source.digits(8)
    if branch is None:
        match Branch.create(source.digits(4)):
            case Err(e):
                raise ValueError(f"DigitSource produced invalid branch digits: {e.message}")
            case Ok(drawn):
                branch = drawn
    match Cnpj.from_base(base, branch):
        case Err(e):
            raise ValueError(f"DigitSource produced invalid CNPJ digits: {e.message}")
        case Ok(cnpj):
            return cnpj


def random_cpfs(source: DigitSource, count: int) -> tuple[Cpf, ...]:
    return tuple(random_cpf(source) for _ in range(count))


def random_cnpjs(
    source: DigitSource, count: int, branch: Branch | None = None,
) -> tuple[Cnpj, ...]:
    return tuple(random_cnpj(source, branch) for _ in range(count))
