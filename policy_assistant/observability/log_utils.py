"""
Structured logging helpers.

Log extras are flattened to short strings so an uploaded payload or a long
chunk list never ends up verbatim in a log line. Domain exceptions contribute
their details dict to the record.

Dependencies: logging (stdlib), policy_assistant.core.exceptions
System role: Logging helper functions
"""

import logging
from typing import Any

from policy_assistant.core.exceptions import PolicyAssistantException

MAX_LOG_VALUE_LENGTH = 500

# Attributes LogRecord sets itself; passing one in extra raises KeyError.
_RESERVED_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime"}


def safe_log_value(value: Any, max_length: int = MAX_LOG_VALUE_LENGTH) -> str:
    """
    Convert any value to a bounded string for logging.

    Bytes and containers are summarized by size instead of rendered.

    Args:
        value: Value to convert
        max_length: Maximum length before truncating

    Returns:
        str: Safe string representation
    """
    try:
        if value is None:
            return "None"
        if isinstance(value, str):
            text = value
        elif isinstance(value, (bytes, bytearray)):
            text = f"<{len(value)} bytes>"
        elif isinstance(value, (list, tuple)):
            text = f"{type(value).__name__}({len(value)} items)"
        elif isinstance(value, dict):
            text = f"dict({len(value)} keys)"
        else:
            text = str(value)

        if len(text) > max_length:
            return text[:max_length] + f"... (truncated, {len(text)} total)"
        return text
    except Exception as e:
        return f"<unable to log: {type(e).__name__}>"


def safe_context(context: dict[str, Any]) -> dict[str, str]:
    """
    Prepare a dict for use as logging extra.

    Values go through safe_log_value; keys that collide with LogRecord
    attributes get a "ctx_" prefix.
    """
    return {
        (f"ctx_{key}" if key in _RESERVED_RECORD_ATTRS else key): safe_log_value(value)
        for key, value in context.items()
    }


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context,
) -> None:
    """
    Log a message with structured context.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        message: Log message
        **context: Arbitrary key-value pairs attached to the record
    """
    logger.log(level, message, extra=safe_context(context))


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: Exception,
    **context,
) -> None:
    """
    Log an exception with its traceback and context.

    For PolicyAssistantException the exception's details are included;
    explicit context wins on key conflicts.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception instance
        **context: Additional context
    """
    merged: dict[str, Any] = {}
    if isinstance(exc, PolicyAssistantException):
        merged.update(exc.details)
    merged.update(context)
    merged["error_type"] = type(exc).__name__
    merged["error_msg"] = str(exc)

    logger.error(message, exc_info=exc, extra=safe_context(merged))
