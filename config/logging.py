# coding: utf-8
"""
Loguru setup for the sentiment proxy and dashboard pipeline.

Sinks:
- stdout at LOG_LEVEL, colorized
- logs/dashboard_<date>.log: everything from DEBUG up (request URLs,
  stale-result drops, elapsed times)
- logs/error_<date>.log: upstream failures and fallback activations

Call ``setup_logging()`` once per process; api_server.py does it at import.
"""
import logging
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from config.config import LOG_LEVEL, ENVIRONMENT

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

# Chatty stdlib loggers from the HTTP client and server
QUIET_LOGGERS = ("aiohttp", "asyncio", "uvicorn.access")

DEFAULT_LOG_DIR = Path(__file__).parent.parent / "logs"


def setup_logging(log_dir: Optional[Path] = None) -> Path:
    """
    Replace loguru's default sink with the dashboard's console and file sinks

    Args:
        log_dir: where the rotating log files go (defaults to ./logs)

    Returns:
        The directory the file sinks write to
    """
    logger.remove()

    logs_dir = Path(log_dir) if log_dir is not None else DEFAULT_LOG_DIR
    logs_dir.mkdir(parents=True, exist_ok=True)

    logger.add(sys.stdout, format=CONSOLE_FORMAT, level=LOG_LEVEL, colorize=True)

    logger.add(
        logs_dir / "dashboard_{time:YYYY-MM-DD}.log",
        format=LOG_FORMAT,
        level="DEBUG",
        rotation="00:00",
        retention="7 days",
        compression="zip",
        encoding="utf-8",
    )

    # Fallback activations log at ERROR, so this file shows every sample-data episode
    logger.add(
        logs_dir / "error_{time:YYYY-MM-DD}.log",
        format=LOG_FORMAT,
        level="ERROR",
        rotation="00:00",
        retention="30 days",
        compression="zip",
        encoding="utf-8",
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logger.info(f"Sentiment Dashboard logging ready | Environment: {ENVIRONMENT} | Level: {LOG_LEVEL}")
    return logs_dir
