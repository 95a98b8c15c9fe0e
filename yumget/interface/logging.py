# SPDX-License-Identifier: GPL-3.0-or-later
import logging
import sys

LOG_FORMAT = "%(levelname)s %(message)s"


def setup_logging(verbose: bool = False) -> None:
    """Send yum-get log messages to stderr.

    Errors and warnings are always shown, progress messages only in verbose mode.
    """
    logger = logging.getLogger("yumget")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    # Replace the handler from a previous call instead of stacking them
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
