"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from policy_assistant.configs.base import BaseSettings
from policy_assistant.configs.gemini import GeminiSettings
from policy_assistant.configs.ingestion import IngestionSettings
from policy_assistant.configs.server import ServerSettings
from policy_assistant.configs.vector_store import VectorStoreSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    gemini: GeminiSettings = Field(default_factory=GeminiSettings)
    vector_store: VectorStoreSettings = Field(default_factory=VectorStoreSettings)
    ingestion: IngestionSettings = Field(default_factory=IngestionSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Return the process-wide Settings, read from the environment on first call.

    Tests call get_settings.cache_clear() after changing environment variables.
    """
    return Settings()
