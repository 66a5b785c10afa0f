"""Logging setup for scripts that want to see traversal diagnostics."""

import logging
import sys
from typing import Optional, TextIO

PACKAGE_LOGGER = "voxel_raytrace"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Attach handlers to the ``voxel_raytrace`` logger and return it.

    Only the package logger is touched, so an application's root logging
    setup is left alone. Calling this again replaces the handlers added by
    the previous call.

    Args:
        level: Level for the package logger (e.g. logging.DEBUG)
        log_file: Optional path of a file to log to as well
        stream: Console stream, stdout when None
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    handlers = [logging.StreamHandler(stream if stream is not None else sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    formatter = logging.Formatter(DEFAULT_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(level)

    # numba's compiler chatter is rarely useful at DEBUG
    logging.getLogger("numba").setLevel(logging.WARNING)
    return logger
