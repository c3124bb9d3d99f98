import logging
import sys

from pythonjsonlogger.json import JsonFormatter

from weather_tracker.config import get_settings

settings = get_settings()


def setup_logger(name: str) -> logging.Logger:
    """
    Set up a logger with JSON formatting for structured logging.

    Args:
        name: The name of the logger (usually __name__)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logger.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)

    formatter = JsonFormatter(
        fmt="%(asctime)s %(name)s %(levelname)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)

    logger.addHandler(handler)
    logger.propagate = False

    return logger
