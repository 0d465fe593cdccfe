"""
Process-wide settings.

Unprefixed variables (ENVIRONMENT, DEBUG, LOG_LEVEL) shared by the whole
service. The grouped settings classes read their own prefixed variables.

Dependencies: pydantic, pydantic_settings
System role: Foundation for the aggregated Settings class
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class BaseSettings(PydanticBaseSettings):
    """Service-wide settings without an env prefix."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Deployment environment, reported at startup",
    )
    debug: bool = Field(
        default=False,
        description="Run FastAPI in debug mode",
    )
    log_level: LogLevel = Field(
        default="INFO",
        description="Root log level",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value
