"""
Console (and optional file) output for chartmath's module loggers.

Library modules only call logging.getLogger(__name__); nothing is printed
until an application or notebook calls setup_logging().
"""
import logging
import os
import sys
from typing import Optional

DEBUG_ENV_VAR = "CHARTMATH_DEBUG"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: Optional[int] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach handlers to the 'chartmath' logger, replacing any from a previous call.

    Args:
        level: Threshold for the logger and its handlers. When omitted,
               DEBUG if CHARTMATH_DEBUG is set, otherwise WARNING.
        log_file: Also write records to this file (truncated on each call)

    Returns:
        The 'chartmath' logger

    Example:
        setup_logging(logging.DEBUG)  # degenerate scales, decimation, frames
    """
    if level is None:
        level = logging.DEBUG if os.environ.get(DEBUG_ENV_VAR) else logging.WARNING

    logger = logging.getLogger("chartmath")
    logger.setLevel(level)
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("chartmath logging at level %s", logging.getLevelName(level))
    return logger
