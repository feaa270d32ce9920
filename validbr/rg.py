"""RG — Registro Geral, the state identity document.

RG numbering differs per issuing state and carries no nationwide checksum, so
an Rg is only a non-empty code paired with its issuing organization
(e.g. ``"12.345.678-9"`` issued by ``"SSP/SP"``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final

from validbr.core.errors import InvalidFormatError, RegistryError
from validbr.core.result import Err, Ok

_NAME = "RG"


@final
@dataclass(frozen=True, slots=True)
class Rg:
    """Identity document code and its issuing organization."""

    code: str
    issuer: str

    def __post_init__(self) -> None:
        for name in ("code", "issuer"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise TypeError(f"Rg.{name} must be a non-empty string, got {value!r}")

    @staticmethod
    def create(code: str, issuer: str) -> Ok[Rg] | Err[RegistryError]:
        """Strip both fields and reject empty ones."""
        for name, value in (("code", code), ("issuer", issuer)):
            if not isinstance(value, str) or not value.strip():
                error = InvalidFormatError.of(_NAME, repr(value), "Rg.create")
                return Err(error.with_context(name))
        return Ok(Rg(code=code.strip(), issuer=issuer.strip()))

    def __str__(self) -> str:
        return f"{self.code} {self.issuer}"
