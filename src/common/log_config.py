"""
Logging Configuration

Configures logging for the reorder run.
Output goes to stderr; long runs get timestamps so retry waits can be read
off the log.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Configure the "src" logger.

    Args:
        verbose: If True, set level to DEBUG (logs every request)
        quiet: If True, set level to WARNING (retries and errors only)
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    logger = logging.getLogger("src")
    logger.setLevel(level)

    # Avoid duplicate handlers if called multiple times
    logger.handlers.clear()
    logger.addHandler(handler)
