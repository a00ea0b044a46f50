"""Logging setup for the pathtracker command line and dashboard."""

import logging
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
LOG_LEVEL_ENV_VAR = "PATHTRACKER_LOG_LEVEL"


def configure_logging(level: Optional[str] = None):
    """
    Configure root logging.

    Level comes from the argument, then $PATHTRACKER_LOG_LEVEL, then WARNING.
    """
    level = (level or os.getenv(LOG_LEVEL_ENV_VAR) or "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format=LOG_FORMAT,
        force=True,
    )
