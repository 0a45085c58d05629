"""
Logging setup for applications using the client.

The library itself only logs through module loggers under "github_client";
configure_logging is a convenience for scripts.
"""

import json
import logging
import sys
from typing import Optional, TextIO


class StructuredLogFormatter(logging.Formatter):
    """
    Formats log records as JSON lines.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_record = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_record, ensure_ascii=False)


def configure_logging(
    log_level: str = "INFO",
    structured: bool = False,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Attach a stream handler to the "github_client" logger.

    Args:
        log_level: Level name, e.g. "DEBUG"
        structured: Emit JSON lines instead of plain text
        stream: Target stream (stderr by default)

    Returns:
        The configured package logger
    """
    logger = logging.getLogger("github_client")
    logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    if structured:
        handler.setFormatter(StructuredLogFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))

    logger.addHandler(handler)
    logger.setLevel(log_level.upper())
    logging.getLogger("urllib3").setLevel("WARNING")
    return logger
