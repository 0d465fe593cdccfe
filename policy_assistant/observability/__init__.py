"""
Observability module.

Console logging with correlation IDs and request logging middleware.
"""

from policy_assistant.observability.logger import configure_logging

__all__ = ["configure_logging"]
