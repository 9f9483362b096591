"""
Logger configuration.

Console logging for the adapter. Records carry their structured context
in extra={...}; ContextFormatter appends those fields as key=value pairs
after the message so pool, statement and collection context survive in
plain-text logs.

Dependencies: logging (stdlib)
System role: Centralized logging configuration
"""

import logging
import sys

# Attributes present on every LogRecord; anything else came from extra={...}
_RESERVED = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}


class ContextFormatter(logging.Formatter):
    """Formatter that renders extra={...} fields after the message."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = {
            key: value for key, value in vars(record).items() if key not in _RESERVED
        }
        if not context:
            return line
        pairs = " ".join(f"{key}={value!r}" for key, value in sorted(context.items()))
        return f"{line} | {pairs}"


def configure_logging(level: str = "INFO") -> None:
    """
    Configure root logging with ISO timestamps on stdout.

    Args:
        level: Root log level name (e.g. "INFO", "DEBUG")
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        ContextFormatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )

    root_logger.setLevel(level.upper())
    root_logger.addHandler(handler)

    # Statement echo is controlled by DB_ECHO_SQL, not the root level
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiomysql").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
