"""
Logger utility for application-wide logging.
"""

import logging
from typing import Optional, Dict, Any

from app.config.settings import settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance with the specified name.

    The level comes from the LOG_LEVEL setting. A handler is attached only
    once per logger name.

    Args:
        name: Logger name, typically __name__ from calling module.

    Returns:
        logging.Logger: Configured logger instance.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(settings.log_level.upper())
        logger.propagate = False

    return logger


def _with_extra(message: str, extra_data: Optional[Dict[str, Any]]) -> str:
    if extra_data:
        return f"{message} - {extra_data}"
    return message


def log_info(logger: logging.Logger, message: str,
             extra_data: Optional[Dict[str, Any]] = None) -> None:
    """
    Log an info level message with optional extra data.

    Args:
        logger: Logger instance.
        message: Log message.
        extra_data: Optional dictionary with additional information.
    """
    logger.info(_with_extra(message, extra_data))


def log_warning(logger: logging.Logger, message: str,
                extra_data: Optional[Dict[str, Any]] = None) -> None:
    """Log a warning level message with optional extra data."""
    logger.warning(_with_extra(message, extra_data))


def log_error(logger: logging.Logger, message: str,
              extra_data: Optional[Dict[str, Any]] = None) -> None:
    """Log an error level message with optional extra data."""
    logger.error(_with_extra(message, extra_data))
