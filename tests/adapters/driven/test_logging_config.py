"""Tests for console logging setup."""

import logging
from collections.abc import Iterator

import pytest

from status_hooks.adapters.driven.logging.logging_config import LOG_FORMAT, configure_logs

__all__ = []


@pytest.fixture
def restore_root() -> Iterator[logging.Logger]:
    """Undo handler and level changes made to the root logger."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_configure_logs_installs_one_handler(restore_root) -> None:
    """Repeated calls should not stack console handlers."""
    before = len(restore_root.handlers)

    configure_logs()
    configure_logs(logging.WARNING)

    assert len(restore_root.handlers) == before + 1
    assert restore_root.level == logging.WARNING
    assert restore_root.handlers[-1].formatter._fmt == LOG_FORMAT


def test_configure_logs_sets_library_levels(restore_root) -> None:
    """Framework loggers are quietened, application loggers are verbose."""
    configure_logs()

    assert logging.getLogger("aiohttp").level == logging.WARNING
    assert logging.getLogger("asyncio").level == logging.WARNING
    assert logging.getLogger("status_hooks").level == logging.DEBUG
