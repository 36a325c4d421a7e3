"""
Logging utilities for the turtle graphics toolkit.
"""
import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "turtlegraphics"

_configured = False


def setup_logger(level: str = "INFO") -> logging.Logger:
    """Attach a console handler to the package logger and return it."""
    global _configured

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    log_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(log_level)

    if _configured:
        return logger

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_format = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(console_format)
    logger.addHandler(console_handler)

    _configured = True
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger below the package logger."""
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
