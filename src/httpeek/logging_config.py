"""
Logging configuration for httpeek.

Log records go to stderr so that stdout carries nothing but the rendered
response.
"""

import logging
import sys


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """
    Set up logging for httpeek.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        Configured package logger
    """
    logger = logging.getLogger("httpeek")
    logger.setLevel(getattr(logging, level.upper()))

    # Clear existing handlers
    logger.handlers.clear()

    console_fmt = logging.Formatter(
        fmt='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logger.level)
    console_handler.setFormatter(console_fmt)
    logger.addHandler(console_handler)

    # Prevent propagation to root logger
    logger.propagate = False

    return logger


def configure_logging(debug: bool = False) -> None:
    """
    Quick logging configuration.

    Args:
        debug: Enable debug logging
    """
    setup_logging(level="DEBUG" if debug else "WARNING")
