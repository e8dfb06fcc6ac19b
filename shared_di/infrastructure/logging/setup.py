"""
Logging setup for the command-line host.

Every record carries a ``service`` extra: ``LoguruLogger`` binds it per
service, and records from the container itself fall back to
``DEFAULT_SERVICE``. Both sinks print it next to the level.
"""

import sys
from pathlib import Path

from loguru import logger

from ..config.models import LoggingConfig

DEFAULT_SERVICE = "shared_di"

LOG_FILE_NAME = "shared-di.log"

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<magenta>{extra[service]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

FILE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[service]} | "
    "{name}:{function}:{line} - {message}"
)


def setup_logging(config: LoggingConfig) -> None:
    """
    Replace loguru's sinks with the ones enabled in ``config``.

    Args:
        config: Logging configuration
    """
    logger.remove()
    logger.configure(extra={"service": DEFAULT_SERVICE})

    if config.console_enabled:
        logger.add(
            sys.stderr,
            format=CONSOLE_FORMAT,
            level=config.level,
            colorize=True,
            backtrace=config.level in ("TRACE", "DEBUG"),
        )

    if config.file_enabled:
        log_dir = Path(config.log_directory)
        log_dir.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_dir / LOG_FILE_NAME,
            format=FILE_FORMAT,
            level=config.level,
            rotation=config.max_file_size,
            retention=config.backup_count,
        )

    logger.debug(f"Logging configured at {config.level}")
