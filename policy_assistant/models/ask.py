"""
Ask domain models and schemas.

Request/response schemas for question answering.

Dependencies: pydantic
System role: Ask API contracts
"""

from typing import Any

from pydantic import BaseModel, Field


class AskRequest(BaseModel):
    """Request schema for a question."""

    query: str | None = Field(default=None, description="User question")


class AskResponse(BaseModel):
    """Response schema for an answer."""

    message: Any = Field(
        description="Handoff text, or the structured answer returned by the model",
    )
