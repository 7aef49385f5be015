from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the QueueListener architecture, idempotency of configuration,
and log file rotation.
"""

import logging
import time
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

import pytest

from termtree.infra.logging import (
    _CONFIGURED_FLAG_ATTR,
    _HANDLER_TAG_ATTR,
    _QUEUE_LISTENER_ATTR,
    LoggingConfig,
    configure_logging,
)


@pytest.fixture(autouse=True)
def reset_logging() -> None:
    """Clean up our root logger state before and after each test."""

    def _reset() -> None:
        root = logging.getLogger()
        listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
        if listener and isinstance(listener, QueueListener):
            if getattr(listener, "_thread", None) is not None:
                listener.stop()
            setattr(root, _QUEUE_LISTENER_ATTR, None)

        for h in list(root.handlers):
            if getattr(h, _HANDLER_TAG_ATTR, False):
                root.removeHandler(h)
                h.close()

        if hasattr(root, _CONFIGURED_FLAG_ATTR):
            delattr(root, _CONFIGURED_FLAG_ATTR)

    _reset()
    yield
    _reset()


def _our_handlers():
    return [h for h in logging.getLogger().handlers if getattr(h, _HANDLER_TAG_ATTR, False)]


def test_logging_idempotency() -> None:
    """TC-01: Multiple config calls do not duplicate handlers."""
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    initial = len(_our_handlers())
    configure_logging(cfg)

    assert initial == 1
    assert len(_our_handlers()) == initial
    assert isinstance(_our_handlers()[0], QueueHandler)


def test_logging_force_reconfigures_level() -> None:
    """TC-02: `force` re-applies the level."""
    configure_logging(LoggingConfig(level="INFO"))
    configure_logging(LoggingConfig(level="DEBUG"), force=True)

    assert logging.getLogger().level == logging.DEBUG
    assert len(_our_handlers()) == 1


def test_unknown_level_defaults_to_info() -> None:
    configure_logging(LoggingConfig(level="chatty"))

    assert logging.getLogger().level == logging.INFO


def test_log_file_receives_records(tmp_path: Path) -> None:
    """TC-03: Records reach the rotating file handler through the queue."""
    log_file = tmp_path / "logs" / "termtree.log"
    configure_logging(LoggingConfig(level="DEBUG", console=False, log_file=str(log_file)))

    logging.getLogger("termtree.test").info("tree analysed")

    listener = getattr(logging.getLogger(), _QUEUE_LISTENER_ATTR)
    listener.stop()

    assert "tree analysed" in log_file.read_text(encoding="utf-8")


def test_log_rotation(tmp_path: Path) -> None:
    """TC-04: File rotation when the size limit is exceeded."""
    log_file = tmp_path / "rotate.log"
    cfg = LoggingConfig(
        level="DEBUG",
        console=False,
        log_file=str(log_file),
        max_bytes=100,
        backup_count=1,
    )

    configure_logging(cfg)
    logger = logging.getLogger("test_rotate")
    for _ in range(10):
        logger.debug("This is a long log message to trigger rotation." * 5)

    time.sleep(0.5)
    listener = getattr(logging.getLogger(), _QUEUE_LISTENER_ATTR)
    listener.stop()

    assert (tmp_path / "rotate.log.1").exists()
