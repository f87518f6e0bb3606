"""Engine and client loggers writing coloured lines to standard output."""

from __future__ import annotations

import logging
import sys

CORE_LOGGER_NAME = "CONFUSE ENGINE"
CLIENT_LOGGER_NAME = "APP"

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

_COLOURS = {
    TRACE: "\033[37m",
    logging.DEBUG: "\033[36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33;1m",
    logging.ERROR: "\033[31;1m",
    logging.CRITICAL: "\033[1;41m",
}
_RESET = "\033[0m"


class _ConsoleFormatter(logging.Formatter):
    def __init__(self) -> None:
        super().__init__("[%(asctime)s] %(name)s: %(message)s", datefmt="%H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        isatty = getattr(sys.stdout, "isatty", None)
        if isatty is not None and isatty():
            colour = _COLOURS.get(record.levelno, "")
            return f"{colour}{line}{_RESET}" if colour else line
        return line


class _ConsoleHandler(logging.StreamHandler):
    """Writes to whatever ``sys.stdout`` is at the time of each record."""

    def __init__(self) -> None:
        super().__init__(sys.stdout)
        self.setFormatter(_ConsoleFormatter())

    def emit(self, record: logging.LogRecord) -> None:
        self.stream = sys.stdout
        super().emit(record)


def _configure(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(TRACE)
    logger.propagate = False
    if not any(isinstance(h, _ConsoleHandler) for h in logger.handlers):
        logger.addHandler(_ConsoleHandler())
    return logger


def init() -> None:
    """Set up the core and client loggers at trace level."""
    _configure(CORE_LOGGER_NAME)
    _configure(CLIENT_LOGGER_NAME)


def core_logger() -> logging.Logger:
    return logging.getLogger(CORE_LOGGER_NAME)


def client_logger() -> logging.Logger:
    return logging.getLogger(CLIENT_LOGGER_NAME)