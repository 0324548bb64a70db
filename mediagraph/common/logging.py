# mediagraph/common/logging.py
from __future__ import annotations

import logging
from typing import Optional


def get_logger(name: str = "uvicorn.error", level: Optional[int | str] = None) -> logging.Logger:
    """
    Return a logger that plays nice with Uvicorn if running under it.
    If nothing has configured the root logger yet, we add a basicConfig once.

    Without `level` the logger is left at NOTSET so it inherits from its
    parent; module loggers rely on this to follow the level create_app()
    puts on the "mediagraph" logger. `level` may be an int or a level name.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        level = resolved if isinstance(resolved, int) else logging.INFO
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers and not logger.handlers:
        logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    if level is not None:
        logger.setLevel(level)
    return logger
