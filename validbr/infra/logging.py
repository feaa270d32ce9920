"""structlog configuration for the validbr command line.

Console-rendered events on stderr by default, JSON lines with --log-json.
CPF and CNPJ values are personal data: every digit but the last two is
masked in the ``input`` and ``value`` fields before rendering.

The library modules never log; failures are returned as Err values. Only the
CLI emits events.
"""

from __future__ import annotations

import logging
import re
import sys
from collections.abc import MutableMapping
from typing import Any

import structlog

LOGGER_NAME = "validbr"

MASKED_FIELDS = frozenset({"input", "value"})

# a digit followed by at least two more digits
_MASKABLE = re.compile(r"\d(?=(?:\D*\d){2})")


def mask_digits(text: str) -> str:
    """Replace every digit except the last two: 123.456.789-09 -> ***.***.***-09."""
    return _MASKABLE.sub("*", text)


def mask_identifiers(
    _logger: Any, _method: str, event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    for key in MASKED_FIELDS & event_dict.keys():
        if isinstance(event_dict[key], str):
            event_dict[key] = mask_digits(event_dict[key])
    return event_dict


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Route structlog and stdlib logging through one stderr handler.

    Args:
        verbose: DEBUG for the validbr loggers; otherwise WARNING.
        log_json: JSON renderer instead of the console renderer.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        mask_identifiers,
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[*shared_processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
    ))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(LOGGER_NAME).setLevel(logging.DEBUG if verbose else logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Logger under the validbr namespace, e.g. get_logger("cli")."""
    return structlog.get_logger(f"{LOGGER_NAME}.{name}")
