"""Root logger set-up for console sessions."""

from __future__ import annotations

import logging

import coloredlogs

module_logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(name)s[%(process)d] %(levelname)s %(message)s"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Install coloredlogs on the root logger.

    Unknown level names fall back to INFO.
    """
    root_logger = logging.getLogger()
    level_str = level.upper()

    level_int = getattr(logging, level_str, None)
    if not isinstance(level_int, int):
        module_logger.warning(f"Invalid log level '{level_str}'. Defaulting to INFO.")
        level_int = logging.INFO

    root_logger.setLevel(logging.DEBUG)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    coloredlogs.install(
        level=level_int,
        fmt=LOG_FORMAT,
        logger=root_logger,
        reconfigure=True,
    )
    return root_logger
