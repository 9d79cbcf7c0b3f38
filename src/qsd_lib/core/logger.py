# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

from .config import CFG


def get_logger(name: str, show_time: bool = False) -> logging.Logger:
    """
    Return a logger writing colored records to standard error.

    Debug records are shown, together with timestamps, only if the debug
    mode environment variable is set. Requesting the same logger again
    replaces its handler instead of adding another one.
    """
    logger = logging.getLogger(name)

    level = (
        logging.DEBUG
        if os.environ.get(CFG.env_vars.debug_mode) is not None
        else logging.INFO
    )
    logger.setLevel(level)

    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        show_path=False,
        show_level=True,
        show_time=show_time or level == logging.DEBUG,
        log_time_format=CFG.date_formats.standard,
        tracebacks_width=None,
        tracebacks_code_width=None,
    )
    handler.setLevel(level)

    for existing in [h for h in logger.handlers if isinstance(h, RichHandler)]:
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.propagate = False

    return logger
