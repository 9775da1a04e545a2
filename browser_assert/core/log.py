"""
loguru 日志初始化：移除默认 sink，按配置级别输出到 stderr（可选写文件）。
"""
# @file purpose: Configure the loguru logger.

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

from .settings import settings

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> | "
    "<level>{message}</level>"
)


def setup_logging(level: str | None = None, log_file: Path | None = None) -> None:
    """Replace loguru's default sink with one at the configured level."""
    lvl = (level or settings.log_level).upper()
    log_file = log_file or settings.log_file
    logger.remove()
    logger.add(sys.stderr, level=lvl, format=LOG_FORMAT, colorize=True)
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(str(log_file), level=lvl, format=LOG_FORMAT.replace("{level: <8}", "{level}"))
    logger.debug(f"Logger initialized with level: {lvl}")
