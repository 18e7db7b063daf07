"""Logging helpers for the nursing rules core."""
from __future__ import annotations

import logging
import re
from typing import Optional

from ..config import Settings, get_settings

__all__ = ["PHIRedactor", "setup_logging", "LOG_FORMAT"]

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# CNS (15 digits), CPF and phone numbers, in that order so the longer match wins.
_RE_SENSITIVE = re.compile(
    r"(\b\d{3}\s?\d{4}\s?\d{4}\s?\d{4}\b"
    r"|\b\d{3}\.?\d{3}\.?\d{3}-?\d{2}\b"
    r"|\(?\b\d{2}\)?\s?9?\d{4}-?\d{4}\b)"
)


class PHIRedactor(logging.Filter):
    """Filter that redacts simple personal identifiers from log records."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401
        if record.args:
            record.msg = record.getMessage()
            record.args = None
        if isinstance(record.msg, str):
            record.msg = _RE_SENSITIVE.sub("[REDACTED]", record.msg)
        return True


def setup_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """Configure the ``enfermagem`` logger from *settings*."""

    settings = settings or get_settings()
    logger = logging.getLogger("enfermagem")
    logger.setLevel(getattr(logging, settings.log_level, logging.INFO))
    formatter = logging.Formatter(LOG_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if settings.log_path is not None:
        settings.log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(settings.log_path, encoding="utf-8"))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        handler.setFormatter(formatter)
        if settings.log_redact:
            handler.addFilter(PHIRedactor())
        logger.addHandler(handler)
    return logger
