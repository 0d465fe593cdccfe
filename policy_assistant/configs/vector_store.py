"""
Vector store configuration settings.

Manages Qdrant connection and collection configuration for vector storage
and retrieval.

Dependencies: pydantic, pydantic_settings
System role: Vector database configuration for RAG retrieval
"""

from typing import Literal

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class VectorStoreSettings(BaseSettings):
    """Qdrant vector store configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="QDRANT_",
        case_sensitive=False,
        extra="ignore",
    )

    url: str = Field(default="http://localhost:6333", description="Qdrant REST endpoint")
    api_key: SecretStr | None = Field(default=None, description="Qdrant API key")
    collection_name: str = Field(
        default="policy_documents",
        description="Collection holding every uploaded document",
    )
    distance: Literal["Cosine", "Dot", "Euclid", "Manhattan"] = Field(
        default="Cosine",
        description="Distance metric used when the collection is created",
    )
    top_k: int = Field(default=5, ge=1, le=100, description="Number of top results to retrieve")
