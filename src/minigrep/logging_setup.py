"""Loguru configuration for the minigrep command."""

import sys
from pathlib import Path
from typing import Optional, TextIO

from loguru import logger

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")

CONSOLE_FORMAT = (
    "<level>{level.icon} {level: <8}</level> | "
    "<cyan>{name}:{function}:{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {elapsed} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logger(level: str = "WARNING", log_file: Optional[str] = None, sink: Optional[TextIO] = None):
    """配置 Loguru 日志系统

    Args:
        level: 控制台日志级别
        log_file: 可选的日志文件路径，文件中始终记录 DEBUG 及以上
        sink: 控制台输出流，默认 sys.stderr（stdout 只留给匹配行）

    Returns:
        配置好的 logger
    """
    logger.remove()

    logger.add(
        sink if sink is not None else sys.stderr,
        level=level.upper(),
        format=CONSOLE_FORMAT,
    )

    if log_file:
        path = Path(log_file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            str(path),
            level="DEBUG",
            rotation="10 MB",
            retention="30 days",
            encoding="utf-8",
            format=FILE_FORMAT,
        )

    logger.debug(f"日志系统已初始化，级别: {level.upper()}")
    return logger
