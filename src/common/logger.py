"""Logging utilities with rich console output.

Usage:
    from common.logger import get_logger

    logger = get_logger(__name__)
    logger.info(f"Fetching {url}")
    logger.error("Upstream failure", exc_info=True)
"""

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

from common.env import env

# Global console instance for consistent output
console = Console(stderr=True)


def _rich_handler(show_time: bool = False, show_path: bool = False) -> RichHandler:
    handler = RichHandler(
        console=console,
        show_time=show_time,
        show_path=show_path,
        rich_tracebacks=True,
        markup=False,  # log lines carry raw upstream URLs and markup
    )
    handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    return handler


class _UnhandledOnly(logging.Filter):
    """Pass records whose own logger has no handler (third-party libraries)."""

    def filter(self, record: logging.LogRecord) -> bool:
        return not logging.getLogger(record.name).handlers


def get_logger(
    name: str,
    level: str | None = None,
    show_time: bool = False,
    show_path: bool = False,
) -> logging.Logger:
    """Get a configured logger with rich output.

    Args:
        name: Logger name (typically __name__ of the module)
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               If None, uses environment variable LOG_LEVEL or defaults to INFO.
        show_time: Show timestamp in log output
        show_path: Show file path in log output

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Avoid adding multiple handlers if logger already configured
    if logger.handlers:
        return logger

    logger.setLevel((level or env.log_level()).upper())
    logger.addHandler(_rich_handler(show_time=show_time, show_path=show_path))

    # Module loggers print through their own handler; keep propagation so
    # pytest's caplog still captures records.
    logger.propagate = True

    return logger


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure the root logger once at application start.

    LOG_LEVEL in the environment overrides ``level``. Loggers created with
    get_logger keep printing through their own handler; the root console
    handler only shows records from other loggers.

    Args:
        level: Default logging level for all modules
        log_file: Optional file path to also log to a file
    """
    level = os.getenv("LOG_LEVEL", level).upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    console_handler = _rich_handler(show_time=True)
    console_handler.addFilter(_UnhandledOnly())
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root_logger.addHandler(file_handler)
