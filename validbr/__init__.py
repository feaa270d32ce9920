"""validbr — Brazilian registry identifiers: CPF, CNPJ and RG.

CPF and CNPJ values are checksum-guaranteed: they can only be obtained
through create()/parse(), which return Ok | Err.
"""

from validbr.checksum import entity_check_digits as entity_check_digits
from validbr.checksum import entity_weights as entity_weights
from validbr.checksum import individual_check_digits as individual_check_digits
from validbr.cnpj import Branch as Branch
from validbr.cnpj import Cnpj as Cnpj
from validbr.cnpj import branch_from_number as branch_from_number
from validbr.cnpj import entity_from_digits as entity_from_digits
from validbr.cnpj import entity_from_text as entity_from_text
from validbr.core.errors import (
    CouldNotConvertToDigitsError as CouldNotConvertToDigitsError,
)
from validbr.core.errors import (
    DigitsOutOfBoundsError as DigitsOutOfBoundsError,
)
from validbr.core.errors import (
    InvalidBranchNumberError as InvalidBranchNumberError,
)
from validbr.core.errors import (
    InvalidChecksumError as InvalidChecksumError,
)
from validbr.core.errors import (
    InvalidFormatError as InvalidFormatError,
)
from validbr.core.errors import (
    RegistryError as RegistryError,
)
from validbr.core.errors import (
    ShortStringError as ShortStringError,
)
from validbr.core.result import Err as Err
from validbr.core.result import Ok as Ok
from validbr.core.result import unwrap as unwrap
from validbr.cpf import Cpf as Cpf
from validbr.cpf import individual_from_digits as individual_from_digits
from validbr.cpf import individual_from_text as individual_from_text
from validbr.generator import random_cnpj as random_cnpj
from validbr.generator import random_cpf as random_cpf
from validbr.rg import Rg as Rg

__version__ = "0.3.0"
