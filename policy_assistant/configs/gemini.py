"""
Gemini configuration settings.

Credentials and model identifiers for the embedding and generation APIs.
The embedding dimension must match the Qdrant collection size.

Dependencies: pydantic, pydantic_settings
System role: Generative AI client configuration
"""

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class GeminiSettings(BaseSettings):
    """Google Gemini API configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="GEMINI_",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: SecretStr | None = Field(
        default=None,
        description="Gemini API key (falls back to GOOGLE_API_KEY when unset)",
    )
    embedding_model: str = Field(
        default="models/gemini-embedding-001",
        description="Embedding model ID",
    )
    embedding_dimension: int = Field(
        default=768,
        description="Embedding vector dimension (must equal the collection size)",
        gt=0,
    )
    generation_model: str = Field(
        default="gemini-2.0-flash",
        description="Chat model used for answer synthesis",
    )
    temperature: float = Field(
        default=0.0,
        ge=0.0,
        le=2.0,
        description="Generation temperature (0.0 for deterministic answers)",
    )
