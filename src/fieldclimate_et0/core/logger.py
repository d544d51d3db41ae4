"""
Logging setup for the FieldClimate ET0 proxy.

One named logger writes short lines to the console and detailed lines to a
log file. A filter on both handlers masks the HMAC keys so that no record,
including tracebacks of failed requests, ever carries them.
"""

import logging
import os
import time
from pathlib import Path
from typing import Iterable, Optional


MASK = "[REDACTED]"

CONSOLE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class RedactingFilter(logging.Filter):
    """Replace known secrets in a record's message and arguments."""

    def __init__(self, secrets: Iterable[Optional[str]] = ()):
        super().__init__()
        self.secrets = [s for s in secrets if s]

    def redact(self, text: str) -> str:
        for secret in self.secrets:
            text = text.replace(secret, MASK)
        return text

    def filter(self, record: logging.LogRecord) -> bool:
        if not self.secrets:
            return True
        # Render once so secrets passed through %-args are caught as well
        record.msg = self.redact(record.getMessage())
        record.args = None
        if record.exc_info and not record.exc_text:
            record.exc_text = logging.Formatter().formatException(record.exc_info)
        if record.exc_text:
            record.exc_text = self.redact(record.exc_text)
        return True


def setup_logger(
    name: str = "fieldclimate_et0",
    log_file: Optional[str] = None,
    log_level: Optional[str] = None,
    secrets: Iterable[Optional[str]] = ()
) -> logging.Logger:
    """
    Configure the application logger.

    Args:
        name: Logger name
        log_file: Log file path; LOG_FILE env var or logs/fieldclimate_et0.log
                  when None, no file logging when empty
        log_level: Level name; LOG_LEVEL env var or INFO when None
        secrets: Strings masked out of every record (the API keys)

    Returns:
        Configured logger instance
    """
    if log_file is None:
        log_file = os.getenv("LOG_FILE", "logs/fieldclimate_et0.log")
    level_name = (log_level or os.getenv("LOG_LEVEL") or "INFO").upper()

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level_name, logging.INFO))
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    redactor = RedactingFilter(secrets)

    console = logging.StreamHandler()
    console.setLevel(logging.INFO)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT, DATE_FORMAT))
    console.addFilter(redactor)
    logger.addHandler(console)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, mode="a", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, DATE_FORMAT))
        file_handler.addFilter(redactor)
        logger.addHandler(file_handler)

    return logger


class LoggerContext:
    """Log the start, duration and outcome of an operation; never swallows errors."""

    def __init__(self, logger: logging.Logger, operation: str):
        self.logger = logger
        self.operation = operation
        self._started: Optional[float] = None

    @property
    def elapsed(self) -> float:
        if self._started is None:
            return 0.0
        return time.monotonic() - self._started

    def __enter__(self):
        self._started = time.monotonic()
        self.logger.info(f"Starting {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.logger.info(f"Completed {self.operation} in {self.elapsed:.2f}s")
        else:
            self.logger.error(
                f"Failed {self.operation} after {self.elapsed:.2f}s: {exc_val}",
                exc_info=(exc_type, exc_val, exc_tb)
            )
        return False
