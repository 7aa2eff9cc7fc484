"""Logging setup for the board, built on loguru."""

import sys
from pathlib import Path

from loguru import logger
from rich.console import Console
from rich.logging import RichHandler

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> | "
    "<level>{message}</level>"
)

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"


def setup_logger(
    level: str = "INFO",
    log_file: Path | None = None,
    rotation: str = "10 MB",
    retention: str = "1 week",
    use_rich: bool = True,
) -> None:
    """
    Replace loguru's default sink with the board's console and file sinks.

    Args:
        level: Minimum logging level (DEBUG shows every gesture decision)
        log_file: Optional path to log file. If None, only logs to console
        rotation: When to rotate log files (e.g., "10 MB", "1 day")
        retention: How long to keep log files (e.g., "1 week", "30 days")
        use_rich: Log through Rich so messages do not break rendered tables
    """
    logger.remove()

    if use_rich:
        handler = RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            show_path=False,
            omit_repeated_times=False,
        )
        logger.add(handler, level=level, format="{message}")
    else:
        logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            format=FILE_FORMAT,
            level=level,
            rotation=rotation,
            retention=retention,
            backtrace=True,
        )
        logger.info(f"Logging to file: {log_file}")
