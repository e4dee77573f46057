"""
Logging infrastructure.

Provides logging utilities for the infrastructure layer.
"""
import logging


def get_logger(name: str, level: str = "INFO") -> logging.Logger:
    """
    Get logger instance.

    Args:
        name: Logger name (usually module or package name)
        level: Level name applied when the handler is first attached

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(level.upper())
    return logger
