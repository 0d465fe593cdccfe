"""
Models for document processing pipeline.

Exports: Chunk, IngestionResult
"""

from .chunk import Chunk
from .ingestion_result import IngestionResult

__all__ = ["Chunk", "IngestionResult"]
