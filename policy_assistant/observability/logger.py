"""
Console logging setup.

One stdout handler on the root logger; every record carries the correlation
ID of the request that produced it ("-" outside requests).

Dependencies: logging (stdlib)
System role: Centralized logging configuration
"""

import logging
import sys

from policy_assistant.observability.correlation import get_correlation_id

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(correlation_id)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Client libraries that log every HTTP round trip or every parsed page.
NOISY_LOGGERS = {
    "httpx": logging.WARNING,
    "httpcore": logging.WARNING,
    "urllib3": logging.WARNING,
    "grpc": logging.WARNING,
    "qdrant_client": logging.WARNING,
    "pypdf": logging.ERROR,
}


class CorrelationIdFilter(logging.Filter):
    """Copy the current correlation ID onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id() or "-"
        return True


def configure_logging(level: str = "INFO") -> None:
    """
    Install the console handler on the root logger.

    Safe to call more than once: previously installed root handlers are
    replaced, not duplicated.

    Args:
        level: Root log level name, case-insensitive
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(CorrelationIdFilter())
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    root_logger.setLevel(level.upper())
    root_logger.addHandler(handler)

    for name, noisy_level in NOISY_LOGGERS.items():
        logging.getLogger(name).setLevel(noisy_level)
