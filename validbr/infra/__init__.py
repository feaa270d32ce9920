"""validbr.infra — digit source protocol, adapters, and logging configuration."""

from validbr.infra.logging import configure_logging as configure_logging
from validbr.infra.protocols import DigitSource as DigitSource
from validbr.infra.random_source import RandomDigitSource as RandomDigitSource
from validbr.infra.random_source import SequenceDigitSource as SequenceDigitSource
