"""Logging for desikata.

Entry points (cli, web_ui) call configure_logging() once; library modules
only ever call get_logger(__name__).
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO

from desikata import config

PKG_LOGGER = "desikata"
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

_configured = False


def resolve_level(level: int | str | None = None) -> int:
    """
    Explicit level → DESIKATA_LOG_LEVEL → logging.level in config.yaml.
    Unknown names fall back to INFO.
    """
    if level is None:
        level = os.getenv("DESIKATA_LOG_LEVEL") or config.get("logging.level", "INFO")
    if isinstance(level, int):
        return level

    numeric = logging.getLevelName(str(level).strip().upper())
    return numeric if isinstance(numeric, int) else logging.INFO


def configure_logging(
    level: int | str | None = None, stream: IO[str] = sys.stderr
) -> None:
    global _configured
    if _configured:
        return

    logger = logging.getLogger(PKG_LOGGER)
    logger.handlers = [
        h for h in logger.handlers if not isinstance(h, logging.NullHandler)
    ]

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(resolve_level(level))
    logger.propagate = False

    _configured = True


def get_logger(name: str) -> logging.Logger:
    # silent until an entry point configures output
    pkg = logging.getLogger(PKG_LOGGER)
    if not _configured and not pkg.handlers:
        pkg.addHandler(logging.NullHandler())
    return logging.getLogger(name)
