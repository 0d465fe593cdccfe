"""
Vector database schemas.

Pydantic models for vector operations (points and search results).
Used for type-safe vector store interactions.

Dependencies: pydantic
System role: Type definitions for vector operations
"""

from typing import Any

from pydantic import BaseModel, Field


class VectorPoint(BaseModel):
    """Unit persisted in the collection: one embedded chunk."""

    id: str = Field(description="Unique point identifier (uuid4)")
    vector: list[float] = Field(description="Embedding vector")
    payload: dict[str, Any] = Field(
        default_factory=dict,
        description="Chunk text and metadata stored alongside the vector",
    )


class VectorSearchResult(BaseModel):
    """Single result from vector search."""

    point_id: str = Field(description="Point identifier")
    content: str = Field(description="Chunk text content")
    score: float = Field(description="Similarity score under the collection metric")
    payload: dict[str, Any] = Field(default_factory=dict, description="Full point payload")
