"""
Logging configuration using Loguru.

Records logged through get_logger carry the NoteLens module name in
extra["module"]; records from other libraries show "-" there.
"""

import sys
from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from notelens.config import LoggingConfig

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[module]}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[module]}:{line} - {message}"


def setup_logging(config: "LoggingConfig | None" = None) -> None:
    """
    Replace Loguru's sinks with the NoteLens console and file sinks.

    Args:
        config: Logging configuration (defaults if not provided). The
            file sink is only added when config.log_to_file is set.
    """
    if config is None:
        from notelens.config import LoggingConfig

        config = LoggingConfig()

    logger.remove()
    logger.configure(extra={"module": "-"})

    logger.add(sys.stderr, level=config.level, format=CONSOLE_FORMAT, colorize=True)

    if not config.log_to_file:
        return

    log_path = Path(config.log_dir)
    log_path.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_path / "notelens_{time:YYYY-MM-DD}.log",
        level=config.level,
        format=FILE_FORMAT,
        rotation=config.file_rotation,
        retention=config.file_retention,
        compression=config.compression,
        serialize=config.serialize,
        enqueue=True,
    )


def get_logger(name: str):
    """Get a logger instance for a module."""
    return logger.bind(module=name)
