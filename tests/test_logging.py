"""
Unit tests for loguru setup
"""
import logging

import pytest
from loguru import logger

from config.logging import QUIET_LOGGERS, setup_logging


@pytest.fixture
def log_dir(tmp_path):
    """Configure logging into a temp dir, drop the sinks afterwards"""
    directory = setup_logging(log_dir=tmp_path / "logs")
    yield directory
    logger.remove()


def test_setup_logging_creates_file_sinks(log_dir):
    logger.error("Failed to fetch sentiment data (transport): refused")
    logger.complete()

    dashboard_logs = list(log_dir.glob("dashboard_*.log"))
    error_logs = list(log_dir.glob("error_*.log"))
    assert len(dashboard_logs) == 1
    assert len(error_logs) == 1
    assert "refused" in error_logs[0].read_text(encoding="utf-8")


def test_debug_messages_skip_the_error_log(log_dir):
    logger.debug("Discarding stale sentiment result")
    logger.complete()

    error_log = next(log_dir.glob("error_*.log"))
    dashboard_log = next(log_dir.glob("dashboard_*.log"))
    assert "stale" not in error_log.read_text(encoding="utf-8")
    assert "stale" in dashboard_log.read_text(encoding="utf-8")


def test_setup_logging_quiets_client_loggers(log_dir):
    for name in QUIET_LOGGERS:
        assert logging.getLogger(name).level == logging.WARNING
