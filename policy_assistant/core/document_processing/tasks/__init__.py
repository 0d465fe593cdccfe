"""Ingestion pipeline stages."""

from .chunking_task import ChunkingTask
from .embedding_task import EmbeddingTask
from .extraction_task import ExtractionTask

__all__ = ["ChunkingTask", "EmbeddingTask", "ExtractionTask"]
