"""Logger configuration for SwimStats.

The package logs through loguru but stays silent until the host opts in:
swimstats/__init__.py disables the "swimstats" logger, and setup_logger
re-enables it. Handlers installed by the host are left alone; only the
handlers added here are replaced on a repeated call, unless
replace_existing is set.
"""

import sys
from pathlib import Path

from loguru import logger

from swimstats.config.settings import settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message} | {extra}"

_handler_ids: list[int] = []


def setup_logger(
    level: str | None = None,
    log_file: str | None = None,
    console: bool = True,
    replace_existing: bool = False,
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> None:
    """Enable SwimStats logging with console and optional file output.

    Args:
        level: Logging level (defaults to SWIMSTATS_LOG_LEVEL)
        log_file: Optional path to a rotating log file (defaults to SWIMSTATS_LOG_FILE)
        console: Also write to stderr
        replace_existing: Remove every loguru handler first, including ones
            the host added (for standalone scripts)
        rotation: Log rotation size (e.g., "10 MB", "1 day")
        retention: Log retention period (e.g., "7 days", "1 month")
    """
    level = level or settings.log_level
    log_file = log_file or settings.log_file

    if replace_existing:
        logger.remove()
        _handler_ids.clear()
    while _handler_ids:
        logger.remove(_handler_ids.pop())

    if console:
        _handler_ids.append(
            logger.add(
                sys.stderr,
                format=CONSOLE_FORMAT,
                level=level,
                colorize=True,
            )
        )

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        _handler_ids.append(
            logger.add(
                log_path,
                format=FILE_FORMAT,
                level=level,
                rotation=rotation,
                retention=retention,
                compression="zip",
                backtrace=True,
                diagnose=True,
            )
        )

    logger.enable("swimstats")
    logger.debug("Logger initialized", level=level, log_file=log_file)
