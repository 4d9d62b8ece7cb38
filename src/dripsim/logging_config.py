"""
Logging setup for dripsim.

Per-frame detail is logged at DEBUG; at 20 frames per second that is
noisy, so the default level is INFO. The level and an optional log file
can be set from the environment when starting the window:

    DRIPSIM_LOG_LEVEL=DEBUG DRIPSIM_LOG_FILE=run.log python -m dripsim

matplotlib's own loggers are held at WARNING so font and backend
discovery does not flood a DEBUG run.
"""
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Union

LOGGER_NAME = "dripsim"
LEVEL_ENV = "DRIPSIM_LOG_LEVEL"
FILE_ENV = "DRIPSIM_LOG_FILE"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%H:%M:%S"


def level_from_env(default: int = logging.INFO) -> int:
    """Read a level name (DEBUG, INFO, ...) from DRIPSIM_LOG_LEVEL."""
    name = os.environ.get(LEVEL_ENV)
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level in {LEVEL_ENV}: {name!r}")
    return level


def setup_logging(
    level: Optional[int] = None,
    log_file: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """
    Configure the 'dripsim' logger.

    Args:
        level: Logging level; read from DRIPSIM_LOG_LEVEL (default INFO) if None
        log_file: Also write to this file; read from DRIPSIM_LOG_FILE if None

    Returns:
        The configured package logger
    """
    if level is None:
        level = level_from_env()
    if log_file is None:
        log_file = os.environ.get(FILE_ENV) or None

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Replace handlers from an earlier call instead of stacking them
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logging.getLogger("matplotlib").setLevel(max(level, logging.WARNING))

    logger.info(
        "Logging at %s%s",
        logging.getLevelName(level),
        f", writing to {log_file}" if log_file else "",
    )
    return logger
