"""
Logging setup shared by the lexer and the command-line driver.
"""

import logging
import os
import sys


DEFAULT_LEVEL = "WARNING"


def get_logger(name: str = "joxy") -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    level = os.environ.get("JOXY_LOG_LEVEL", DEFAULT_LEVEL).upper()
    logger.setLevel(getattr(logging, level, logging.WARNING))
    # stdout carries token output
    handler = logging.StreamHandler(stream=sys.stderr)
    fmt = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    handler.setFormatter(fmt)
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def set_level(level: int) -> None:
    """Change the level of every logger created through get_logger."""
    for name, logger in logging.Logger.manager.loggerDict.items():
        if isinstance(logger, logging.Logger) and name.startswith("joxy") and logger.handlers:
            logger.setLevel(level)
