"""Logging initialization using loguru."""

import sys
from pathlib import Path

from loguru import logger


def init_logging(level="INFO", log_dir=None):
    """Send logs to stderr and, when ``log_dir`` is given, to a rotating file."""
    logger.remove()
    logger.add(sys.stderr, level=level, backtrace=False, diagnose=False)

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        logger.add(
            str(log_path / "storyboard_{time:YYYYMMDD}.log"),
            rotation="10 MB",
            retention="10 days",
            compression="zip",
            enqueue=True,
            backtrace=False,
            diagnose=False,
            level=level,
        )
