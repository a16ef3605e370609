"""Logger configuration for daytrip.

The engines log through loguru's shared ``logger`` under the ``daytrip``
namespace, which is disabled on import. A host application calls
``setup_logger`` once at startup to install sinks and turn the engine
events on; structured event fields are rendered from ``{extra}``.
"""

import sys
from pathlib import Path

from loguru import logger

from daytrip.config.settings import settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan> - <level>{message}</level> <dim>{extra}</dim>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message} {extra}"


def setup_logger(
    level: str | None = None,
    log_file: str | None = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> None:
    """Install console and optional file sinks and enable daytrip events.

    Args:
        level: Logging level; defaults to settings.log_level
        log_file: File sink path; defaults to settings.log_file (None = console only)
        rotation: Log rotation size (e.g., "10 MB", "1 day")
        retention: Log retention period (e.g., "7 days", "1 month")
    """
    level = (level or settings.log_level).upper()
    log_file = log_file or settings.log_file

    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            format=FILE_FORMAT,
            level=level,
            rotation=rotation,
            retention=retention,
            compression="zip",
        )

    logger.enable("daytrip")
    logger.info("logger_configured", log_level=level, log_file=log_file)
