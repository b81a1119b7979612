"""
This module provides the logging setup for CICD360.

Every module logs through `logging.getLogger(__name__)`; this function wires
those loggers, and uvicorn's, to a single stderr handler with a timestamped
format.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(message)s"
DATE_FORMAT = "%Y/%m/%d %H:%M:%S"


def setup_logging(level: int = logging.INFO) -> None:
    """
    Configures the root logger for the service.

    Calling it more than once replaces the previous handler rather than
    stacking a new one.

    Args:
        level: The minimum level to emit. Defaults to INFO.
    """
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=DATE_FORMAT, stream=sys.stderr, force=True)
    for name in ("uvicorn", "uvicorn.error"):
        logging.getLogger(name).setLevel(level)
