from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the QueueListener architecture, idempotency of configuration and
log file rotation.
"""

import logging
import time
from pathlib import Path
from typing import Iterator

import pytest

from treeshell.infra.logging import (
    _CONFIGURED_FLAG_ATTR,
    _HANDLER_TAG_ATTR,
    _QUEUE_LISTENER_ATTR,
    LoggingConfig,
    configure_logging,
    shutdown_logging,
)
from treeshell.infra.logging.config import LEVEL_NAMES


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Clean up our root logger handlers before and after each test."""
    shutdown_logging()
    yield
    shutdown_logging()


def test_logging_idempotency() -> None:
    """TC-01: Verify that multiple config calls do not duplicate handlers."""
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    root = logging.getLogger()
    initial_handler_count = len(root.handlers)

    configure_logging(cfg)
    assert len(root.handlers) == initial_handler_count, "Handlers were duplicated."


def test_force_reconfigure_replaces_handlers() -> None:
    """TC-01: force=True swaps the listener instead of stacking handlers."""
    configure_logging(LoggingConfig(level="INFO"))
    root = logging.getLogger()
    first_listener = getattr(root, _QUEUE_LISTENER_ATTR)
    count = len(root.handlers)

    configure_logging(LoggingConfig(level="DEBUG"), force=True)

    assert getattr(root, _QUEUE_LISTENER_ATTR) is not first_listener
    assert len(root.handlers) == count
    assert root.level == logging.DEBUG


def test_log_rotation(tmp_path: Path) -> None:
    """TC-02: Verify file rotation when size limit is exceeded."""
    log_file = tmp_path / "test_rotate.log"
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

    # Give time for the QueueListener to process
    time.sleep(0.5)

    backup_file = tmp_path / "test_rotate.log.1"
    assert log_file.exists()
    assert backup_file.exists(), "Rotation backup file was not created."


def test_queue_listener_architecture() -> None:
    """TC-03: Verify that the root logger uses a QueueHandler-based architecture."""
    configure_logging(LoggingConfig(level="INFO", console=True))

    root = logging.getLogger()
    ours = [h for h in root.handlers if getattr(h, _HANDLER_TAG_ATTR, False)]

    assert len(ours) == 1
    assert getattr(root, _QUEUE_LISTENER_ATTR) is not None


def test_shutdown_detaches_everything() -> None:
    """TC-04: shutdown_logging leaves no tagged handler behind."""
    configure_logging(LoggingConfig(level="INFO"))
    shutdown_logging()

    root = logging.getLogger()
    assert not any(getattr(h, _HANDLER_TAG_ATTR, False) for h in root.handlers)
    assert getattr(root, _QUEUE_LISTENER_ATTR, None) is None
    assert not hasattr(root, _CONFIGURED_FLAG_ATTR)


def test_unwritable_log_file_degrades_to_console(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """TC-05: A log file under a regular file is skipped with a warning."""
    blocker = tmp_path / "blocker"
    blocker.write_text("x")

    configure_logging(LoggingConfig(level="INFO", log_file=str(blocker / "sub" / "app.log")))

    assert "Cannot open log file" in capsys.readouterr().err
    assert getattr(logging.getLogger(), _QUEUE_LISTENER_ATTR) is not None


def test_default_settings_keep_sessions_quiet() -> None:
    cfg = LoggingConfig()

    assert cfg.level == "WARNING"
    assert cfg.log_file is None
    assert LEVEL_NAMES[cfg.level] == logging.WARNING
    assert LEVEL_NAMES["WARN"] == LEVEL_NAMES["WARNING"]
