# findmeme/common/logging.py
from __future__ import annotations

import logging
from typing import Optional


def get_logger(name: str = "uvicorn.error", level: Optional[int | str] = None) -> logging.Logger:
    """
    Logger that shares Uvicorn's handlers when served by it.
    Outside Uvicorn (CLI, Alembic, tests) a root basicConfig is installed once.
    Level defaults to LOG_LEVEL from settings.
    """
    if level is None:
        from findmeme.common.settings import get_settings
        level = get_settings().log_level.upper()
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers and not logger.handlers:
        logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.setLevel(level)
    return logger
