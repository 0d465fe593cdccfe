"""
Ingestion pipeline configuration.

Chunking window and embedding fan-out limits.

Dependencies: pydantic, pydantic_settings
System role: Document ingestion configuration
"""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class IngestionSettings(BaseSettings):
    """Settings for the document ingestion pipeline."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="INGESTION_",
        case_sensitive=False,
        extra="ignore",
    )

    chunk_size: int = Field(default=1000, gt=0, description="Maximum chunk size in characters")
    chunk_overlap: int = Field(
        default=200,
        ge=0,
        description="Overlap between consecutive chunks",
    )
    embedding_concurrency: int = Field(
        default=8,
        ge=1,
        description="Maximum embedding requests in flight per document",
    )

    @model_validator(mode="after")
    def _overlap_smaller_than_chunk(self) -> "IngestionSettings":
        if self.chunk_overlap >= self.chunk_size:
            raise ValueError("chunk_overlap must be smaller than chunk_size")
        return self
