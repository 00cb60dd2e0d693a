"""Loguru sink setup shared by the app, storage and export layers."""

import sys
from pathlib import Path

from loguru import logger

LOG_DIR = Path("logs")

_configured = False


def setup_logging(level="INFO", log_dir=LOG_DIR):
    """Replace loguru's default sink with stderr + a rotating file (idempotent)."""
    global _configured
    if _configured:
        return logger

    log_dir = Path(log_dir)
    log_dir.mkdir(exist_ok=True, parents=True)

    logger.remove()
    logger.add(sys.stderr, level=level)
    logger.add(
        log_dir / "app.log",
        rotation="10 MB",
        retention=10,
        enqueue=True,
        backtrace=True,
        diagnose=False,
        level=level,
    )
    _configured = True
    return logger
