# MIT License (see LICENSE)
"""
Logging setup for applications embedding the simulation.

The library itself only creates module loggers under the "verlet_sim"
namespace and never installs handlers on import. Hosts call setup_logging()
once to get console (and optionally file) output.
"""
from __future__ import annotations
import logging
import os

LOGGER_NAME = "verlet_sim"
DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(
    level: int | str = logging.INFO,
    log_file: str | None = None,
    fmt: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """
    Configure the dedicated "verlet_sim" logger.

    The logger does not propagate to the root logger. Calling this again
    replaces the previous handlers instead of stacking them.

    Args:
        level: Logging level name or number.
        log_file: Optional path of a log file. Parent directories are created.
        fmt: Format string shared by all handlers.

    Returns:
        The configured logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    if logger.hasHandlers():
        for h in list(logger.handlers):
            logger.removeHandler(h)
            h.close()

    formatter = logging.Formatter(fmt)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized (level=%s, file=%s)", logging.getLevelName(logger.level), log_file)
    return logger
