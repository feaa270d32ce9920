"""Registry text formats. Pure configuration data, no parsing here.

Each RegistryFormat names the digits-only length, the punctuated shape and
the sizes of the digit groups the text is sliced into.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import final

# ---------------------------------------------------------------------------
# Shared patterns
# ---------------------------------------------------------------------------

ONLY_NUMBERS: re.Pattern[str] = re.compile(r"[0-9]+")  # used with fullmatch
NOT_NUMBERS: re.Pattern[str] = re.compile(r"\D+")


@final
@dataclass(frozen=True, slots=True)
class RegistryFormat:
    """Accepted text shapes for one registry."""

    name: str
    digits_length: int
    punctuated: re.Pattern[str]
    template: str                  # "#" marks a digit position
    groups: tuple[str, ...]        # field names, in text order
    group_sizes: tuple[int, ...]

    def __post_init__(self) -> None:
        if sum(self.group_sizes) != self.digits_length:
            raise TypeError(
                f"RegistryFormat {self.name}: group sizes {self.group_sizes} "
                f"do not add up to {self.digits_length}"
            )
        if len(self.groups) != len(self.group_sizes):
            raise TypeError(f"RegistryFormat {self.name}: one size per group required")
        if self.template.count("#") != self.digits_length:
            raise TypeError(f"RegistryFormat {self.name}: template digit count mismatch")

    def punctuate(self, digits: str) -> str:
        """Fill the template's digit positions with digits, in order."""
        filled = iter(digits)
        return "".join(next(filled) if c == "#" else c for c in self.template)


# ---------------------------------------------------------------------------
# Registries
# ---------------------------------------------------------------------------

CPF_FORMAT = RegistryFormat(
    name="CPF",
    digits_length=11,
    punctuated=re.compile(r"\d{3}\.\d{3}\.\d{3}-\d{2}"),
    template="###.###.###-##",
    groups=("base", "check"),
    group_sizes=(9, 2),
)

CNPJ_FORMAT = RegistryFormat(
    name="CNPJ",
    digits_length=14,
    punctuated=re.compile(r"\d{2}\.\d{3}\.\d{3}/\d{4}-\d{2}"),
    template="##.###.###/####-##",
    groups=("base", "branch", "check"),
    group_sizes=(8, 4, 2),
)

BRANCH_MAX: int = 9999
FIRST_BRANCH: tuple[int, ...] = (0, 0, 0, 1)
