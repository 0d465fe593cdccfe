"""
Correlation ID storage.

A ContextVar holds the ID of the request being served so that log records
emitted from pipelines and adapters can be tied back to one HTTP call.
Tasks spawned with asyncio.gather inherit the value.

Dependencies: contextvars
System role: Request tracing across async boundaries
"""

from contextvars import ContextVar
import uuid

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def set_correlation_id(correlation_id: str | None = None) -> str:
    """
    Bind a correlation ID to the current context.

    Args:
        correlation_id: Client-supplied ID; a uuid4 is generated when empty

    Returns:
        str: The bound ID
    """
    value = correlation_id or uuid.uuid4().hex
    _correlation_id.set(value)
    return value


def get_correlation_id() -> str:
    """Return the bound ID, or an empty string outside a request."""
    return _correlation_id.get()


def clear_correlation_id() -> None:
    _correlation_id.set("")
