"""
log.py: Logging setup shared by the front ends.
"""

import logging

from .constants import LOG_FILE, LOG_LEVEL


def setup_logging():
    """Logs go to a file so they never land on the game screen."""
    logging.basicConfig(
        filename=LOG_FILE,
        level=LOG_LEVEL,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )
