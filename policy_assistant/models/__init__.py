"""API request/response schemas."""

from policy_assistant.models.ask import AskRequest, AskResponse
from policy_assistant.models.health import HealthResponse

__all__ = ["AskRequest", "AskResponse", "HealthResponse"]
