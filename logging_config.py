"""
Logging for the fold checker.

Every module logs under a child of the ``foldcheck`` logger
(``foldcheck.validator``, ``foldcheck.cli``, ...). The CLI calls
``setup_logging`` once per run; tests may call it repeatedly.
"""
import logging
import sys
from typing import List, Optional, Union

LOGGER_NAME = "foldcheck"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def _level_number(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    number = logging.getLevelName(level.upper())
    if not isinstance(number, int):
        raise ValueError(f"Unknown log level: {level}")
    return number


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Point the 'foldcheck' logger at stderr and, optionally, a file.

    The file is opened before the logger is touched, so an unwritable
    ``log_file`` raises ``OSError`` and leaves the previous handlers in
    place. Handlers from an earlier call are closed and replaced.

    Args:
        level: Logging level, as a number or a name such as "debug".
        log_file: Optional path that receives the same records (truncated).
    """
    level = _level_number(level)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    logger = logging.getLogger(LOGGER_NAME)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    logger.setLevel(level)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging to stderr%s at %s", f" and {log_file}" if log_file else "",
                 logging.getLevelName(level))
    return logger
