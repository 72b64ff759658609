# SPDX-License-Identifier: MIT
"""
Loguru configuration for the runner: coloured console output and an optional
plain-text log file.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

_CONSOLE_COLOR_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<blue>{function}</blue> | "
    "<level>{message}</level>"
)
_PLAIN_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | {message}"


def setup_logger(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    enable_colors: bool = True,
) -> None:
    """
    Replace loguru's default handler with evosim's sinks.

    Args:
        level: Minimum level (DEBUG, INFO, WARNING, ...)
        log_file: Optional path of a log file; parent directories are created
        enable_colors: Colour the console sink when stdout is a TTY
    """
    logger.remove()

    colorize = enable_colors and sys.stdout.isatty()
    logger.add(
        sys.stderr,
        level=level,
        format=_CONSOLE_COLOR_FORMAT if colorize else _PLAIN_FORMAT,
        colorize=colorize,
        backtrace=True,
        diagnose=False,
    )

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level=level,
            format=_PLAIN_FORMAT,
            encoding="utf-8",
            backtrace=True,
            diagnose=False,
        )

    logger.debug("Logger initialized (level={}, file={})", level, log_file)
