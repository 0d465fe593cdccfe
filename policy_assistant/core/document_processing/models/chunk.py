"""
Chunk domain model for document processing pipeline.

Represents a slice of document text with metadata and an optional embedding.
A chunk has no identity of its own; the point ID is assigned at upsert time.

Dependencies: pydantic
System role: Data structure for document chunks in ingestion pipeline
"""

from pydantic import BaseModel, Field


class Chunk(BaseModel):
    """Document chunk with optional embedding vector."""

    content: str = Field(description="Chunk text content")
    metadata: dict = Field(
        default_factory=dict,
        description="Chunk metadata (source, chunk_index, start_index)",
    )
    embedding: list[float] | None = Field(default=None, description="Embedding vector")
