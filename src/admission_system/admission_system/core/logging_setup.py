"""Logging initialization with labeled prefixes (INFO|WARN|ERROR)."""

from __future__ import annotations

import logging
import sys

__all__ = ["setup_logging", "LOGGER_NAME"]

# Package root logger ("admission_system" when installed, "src.admission_system.admission_system" from a checkout).
LOGGER_NAME = __name__.rsplit(".", 2)[0]


class LabeledFormatter(logging.Formatter):
    LEVEL_LABELS = {
        logging.DEBUG: "DEBUG",
        logging.INFO: "INFO",
        logging.WARNING: "WARN",
        logging.ERROR: "ERROR",
        logging.CRITICAL: "CRITICAL",
    }

    def format(self, record: logging.LogRecord) -> str:
        label = self.LEVEL_LABELS.get(record.levelno, record.levelname)
        line = f"{label} [{record.name}] {record.getMessage()}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def setup_logging(level: str | int = "INFO") -> logging.Logger:
    """Configure the package logger once; later calls only adjust the level."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level if isinstance(level, int) else str(level).upper())

    if not any(getattr(h, "_admission_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(LabeledFormatter())
        handler._admission_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    # Own handler above; avoid duplicate lines through the root logger.
    logger.propagate = False
    return logger
