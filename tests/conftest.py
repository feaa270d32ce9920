"""Hypothesis profiles and pytest fixtures for validbr.

Strategies live in tests/strategies.py.
"""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest
from click.testing import CliRunner
from hypothesis import HealthCheck, settings

# ---------------------------------------------------------------------------
# Hypothesis global settings
# ---------------------------------------------------------------------------

settings.register_profile(
    "ci",
    max_examples=200,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.register_profile(
    "dev",
    max_examples=50,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.load_profile("dev")


# ===================================================================
# FIXTURES
# ===================================================================


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test; the CLI reconfigures it."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    validbr_logger = logging.getLogger("validbr")
    validbr_level = validbr_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    validbr_logger.setLevel(validbr_level)
