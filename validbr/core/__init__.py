"""validbr.core — results, error values, digit sequences and registry formats."""

from validbr.core.digits import DigitSequence as DigitSequence
from validbr.core.digits import append as append
from validbr.core.digits import compose as compose
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
from validbr.core.formats import CNPJ_FORMAT as CNPJ_FORMAT
from validbr.core.formats import CPF_FORMAT as CPF_FORMAT
from validbr.core.formats import RegistryFormat as RegistryFormat
from validbr.core.result import Err as Err
from validbr.core.result import Ok as Ok
from validbr.core.result import Result as Result
from validbr.core.result import map_result as map_result
from validbr.core.result import sequence as sequence
from validbr.core.result import unwrap as unwrap
