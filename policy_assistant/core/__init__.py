"""
Core business logic module.

Contains the ingestion and answer pipelines plus the exception hierarchy.
"""

from policy_assistant.core.exceptions import (
    PolicyAssistantException,
    ValidationError,
    DocumentProcessingError,
    ExtractionError,
    EmbeddingError,
    DimensionMismatchError,
    VectorStoreError,
    GenerationError,
    ResponseParseError,
)

__all__ = [
    "PolicyAssistantException",
    "ValidationError",
    "DocumentProcessingError",
    "ExtractionError",
    "EmbeddingError",
    "DimensionMismatchError",
    "VectorStoreError",
    "GenerationError",
    "ResponseParseError",
]
