"""Logging setup and shorthand helpers for AssetGnome.

Library modules log through ``logging.getLogger(__name__)`` and so sit under the
``assetgnome`` package logger. Entry points call ``setup_logger`` once to give
that logger a stderr handler; ``ASSETGNOME_DEBUG=1`` selects the debug level.

The ``debug``/``info``/``warn``/``error`` helpers log on the package logger with
lazy ``%``-style arguments, for code that has no module logger of its own.
"""

import logging
import os
from typing import Any, Optional

LOGGER_NAME = "assetgnome"
LOG_FORMAT = "[%(levelname)s] %(asctime)s %(name)s %(message)s"

DEBUG_ON = os.getenv("ASSETGNOME_DEBUG", "0") == "1"

_handler: Optional[logging.Handler] = None


def setup_logger(level: Optional[int] = None) -> logging.Logger:
    """Attach the stderr handler to the package logger and set its level.

    The handler is added on the first call only; later calls just adjust the
    level.

    Args:
        level: Logging level. Defaults to DEBUG when ASSETGNOME_DEBUG=1,
            INFO otherwise.
    """
    global _handler
    logger = logging.getLogger(LOGGER_NAME)
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(_handler)
    if level is None:
        level = logging.DEBUG if DEBUG_ON else logging.INFO
    logger.setLevel(level)
    return logger


def debug(msg: str, *args: Any) -> None:
    logging.getLogger(LOGGER_NAME).debug(msg, *args)


def info(msg: str, *args: Any) -> None:
    logging.getLogger(LOGGER_NAME).info(msg, *args)


def warn(msg: str, *args: Any) -> None:
    logging.getLogger(LOGGER_NAME).warning(msg, *args)


def error(msg: str, *args: Any) -> None:
    logging.getLogger(LOGGER_NAME).error(msg, *args)
