"""
Logging configuration for the report export package.
"""

import logging
import sys
from typing import Optional

from ..core.config import Config


def setup_logging(log_file: Optional[str] = None, verbose: bool = False) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        log_file: Optional path of a log file written next to the console output
        verbose: Enable DEBUG level output

    Returns:
        logging.Logger: The configured package logger
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(Config.LOGGER_NAME)
    logger.setLevel(level)

    # Drop handlers from a previous call so repeated setup does not duplicate output
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(Config.CONSOLE_LOG_FORMAT))
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(Config.LOG_FORMAT))
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger


def get_logger() -> logging.Logger:
    """Get the package root logger."""
    return logging.getLogger(Config.LOGGER_NAME)


def get_module_logger(module_name: str) -> logging.Logger:
    """Get a logger for a module, nested under the package logger."""
    if module_name.startswith(Config.LOGGER_NAME):
        return logging.getLogger(module_name)
    return logging.getLogger(f"{Config.LOGGER_NAME}.{module_name}")


def get_docx_logger() -> logging.Logger:
    """Get the logger used by DOCX table updates."""
    return logging.getLogger(f"{Config.LOGGER_NAME}.docx")


def get_converter_logger() -> logging.Logger:
    """Get the logger used by the PDF converters."""
    return logging.getLogger(f"{Config.LOGGER_NAME}.converter")
