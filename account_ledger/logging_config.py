"""
Logging setup for the account ledger.

Records go to stderr so stdout stays the console transcript. JSON lines by
default, plain text when LEDGER_LOG_FORMAT=text.
"""

import logging
import json
import sys
from datetime import datetime, timezone
from typing import Optional

LEDGER_LOGGER = "account_ledger"
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Record attributes copied into the JSON line when present
_LEDGER_FIELDS = ("ledger_id", "action", "details")


class JSONFormatter(logging.Formatter):
    """One JSON object per record"""

    def format(self, record):
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in _LEDGER_FIELDS:
            value = getattr(record, name, None)
            if value is not None:
                entry[name] = value

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


def setup_logging(level: str = "WARNING", logger_name: str = LEDGER_LOGGER,
                  log_format: str = "json", stream=None) -> logging.Logger:
    """
    Attach a single stream handler to the package logger.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        logger_name: Logger to configure
        log_format: "json" or "text"
        stream: Output stream, stderr by default

    Returns:
        The configured logger
    """
    logger = logging.getLogger(logger_name)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(TEXT_FORMAT) if log_format == "text" else JSONFormatter())

    logger.addHandler(handler)
    logger.setLevel(level.upper())
    logger.propagate = False
    return logger


def get_logger(name: str = LEDGER_LOGGER) -> logging.Logger:
    return logging.getLogger(name)


def log_action(logger: logging.Logger, level: str, message: str,
               ledger_id: Optional[str] = None, action: Optional[str] = None,
               details: Optional[dict] = None) -> None:
    """Log a ledger action with its amounts attached as structured fields"""
    logger.log(getattr(logging, level.upper()), message,
               extra={"ledger_id": ledger_id, "action": action, "details": details})
