"""Log utilities."""

import logging
from rich.logging import RichHandler


def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """
    Get a logger configured for Rich console output.

    The logger gets a single RichHandler and does not propagate records to
    the root logger, so scenario outcomes are printed exactly once.

    Parameters:
        name (str): Name of the logger to retrieve or create.
        level (int): Logging level; the runner passes DEBUG in verbose mode.

    Returns:
        logging.Logger: The configured logger instance.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers = [RichHandler(show_path=False, markup=False)]
    logger.propagate = False
    return logger
