# Copyright (c) 2025  Feklin Dmitry (FeklinDN@gmail.com)
"""Logging setup for the command-line tool."""
import logging
import os
import sys
from typing import Optional

LOG_LEVEL_ENV = "SEQUENCE_PREDICTOR_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging.

    Args:
        level: DEBUG, INFO, WARNING, ... ; when omitted the
            SEQUENCE_PREDICTOR_LOG_LEVEL environment variable is used,
            then WARNING.
    """
    level_name = (level or os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )
