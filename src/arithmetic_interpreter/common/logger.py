"""Project-wide logger shared by every component."""
import logging
import sys
from typing import Union


LOGGER_NAME: str = "arithmetic_interpreter"
LOG_FORMAT: str = "%(asctime)s | %(levelname)s | %(message)s"


def _build_logger() -> logging.Logger:
    """
    Create the project logger with a single stderr handler.

    :return: Configured logger
    :rtype: logging.Logger
    """
    built = logging.getLogger(LOGGER_NAME)
    if not built.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        built.addHandler(handler)
    built.setLevel(logging.WARNING)
    return built


def set_log_level(level: Union[int, str]) -> None:
    """
    Change the verbosity of the project logger.

    :param level: Logging level, as a number or a name such as ``"DEBUG"``
    """
    logger.setLevel(level)


logger: logging.Logger = _build_logger()
