"""
Ingestion result model.

Represents the outcome of processing a document through the pipeline.

Dependencies: pydantic
System role: Return type for IngestionPipeline.process()
"""

from pydantic import BaseModel, Field


class IngestionResult(BaseModel):
    """Result of document ingestion."""

    document_name: str | None = Field(default=None, description="Uploaded filename")
    chunk_count: int = Field(description="Number of chunks embedded and stored")
    point_ids: list[str] = Field(default_factory=list, description="IDs of the written points")
    processing_time_ms: float = Field(description="Total processing time in milliseconds")
