from __future__ import annotations

import logging
import sys
from typing import TextIO

LogLevels = [
    "error",
    "warn",
    "info",
    "debug",
]

LOG_LEVELS = {
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


class PngChunkFormatter(logging.Formatter):
    default_time_format = "%H:%M:%S"
    default_msec_format = "%s.%03d"

    def format(self, record: logging.LogRecord) -> str:
        time = self.formatTime(record)
        message = record.getMessage()
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        if record.levelno >= logging.WARNING:
            message = f"{record.levelname.lower()}: {message}"
        return f"[{time}] {message}"


class PngChunkLogHandler(logging.StreamHandler):
    """
    Terminal log handler for the pngchunk command line tool.
    Only one instance is ever installed on the package logger.
    """

    def __init__(self, stream: TextIO | None = None):
        super().__init__(stream or sys.stderr)
        self.setFormatter(PngChunkFormatter())


def setup_logging(verbosity: str = "info", stream: TextIO | None = None) -> logging.Logger:
    """
    Install the terminal handler on the "pngchunk" logger, replacing a
    previously installed one.
    """
    if verbosity not in LOG_LEVELS:
        raise ValueError(f"Invalid log level: {verbosity!r}, expected one of {LogLevels}.")
    logger = logging.getLogger("pngchunk")
    for h in list(logger.handlers):
        if isinstance(h, PngChunkLogHandler):
            logger.removeHandler(h)
    handler = PngChunkLogHandler(stream)
    handler.setLevel(LOG_LEVELS[verbosity])
    logger.addHandler(handler)
    logger.setLevel(LOG_LEVELS[verbosity])
    return logger
