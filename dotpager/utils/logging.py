"""Simple logging utilities for dotpager."""

import logging
import sys


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given module name."""
    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(logging.DEBUG)

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)

        logger.addHandler(handler)
        logger.setLevel(logging.WARNING)

    return logger


def setup_cli_logging(verbose: bool = False) -> logging.Logger:
    """Configure the package logger for CLI use.

    Args:
        verbose: Log debug messages instead of warnings only
    """
    logger = get_logger("dotpager")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return logger
