"""
Ingestion pipeline orchestrator.

Coordinates collection setup, extraction, chunking, embedding and upsert for
one uploaded document. Every stage must succeed before the next starts, and
points are written in a single call only after all embeddings exist, so a
failed upload leaves nothing behind in the collection.

Dependencies: All task modules, policy_assistant.boundary
System role: Pipeline orchestration (coordinates only)
"""

import logging
import time
import uuid

from fastapi.concurrency import run_in_threadpool

from policy_assistant.boundary.llm.embeddings import GeminiEmbedder
from policy_assistant.boundary.vdb import PAYLOAD_TEXT_KEY, QdrantVectorStore, VectorPoint
from policy_assistant.configs.ingestion import IngestionSettings
from policy_assistant.observability.log_utils import log_with_context

from .models import Chunk, IngestionResult
from .tasks import ChunkingTask, EmbeddingTask, ExtractionTask

logger = logging.getLogger(__name__)


def build_point(chunk: Chunk) -> VectorPoint:
    """Give an embedded chunk a fresh ID and wrap it as a point."""
    return VectorPoint(
        id=str(uuid.uuid4()),
        vector=chunk.embedding or [],
        payload={PAYLOAD_TEXT_KEY: chunk.content, **chunk.metadata},
    )


class IngestionPipeline:
    """Orchestrate document ingestion: extract -> chunk -> embed -> upsert."""

    def __init__(
        self,
        embedder: GeminiEmbedder,
        vector_store: QdrantVectorStore,
        settings: IngestionSettings | None = None,
    ) -> None:
        """
        Initialize pipeline with its collaborators.

        Args:
            embedder: Embedding adapter
            vector_store: Target collection
            settings: Chunking and concurrency settings (defaults if None)
        """
        self._settings = settings or IngestionSettings()
        self._vector_store = vector_store

        self._extraction_task = ExtractionTask()
        self._chunking_task = ChunkingTask(
            chunk_size=self._settings.chunk_size,
            chunk_overlap=self._settings.chunk_overlap,
        )
        self._embedding_task = EmbeddingTask(
            embedder=embedder,
            max_concurrency=self._settings.embedding_concurrency,
        )

    async def process(self, payload: bytes, document_name: str | None = None) -> IngestionResult:
        """
        Ingest one PDF payload.

        Args:
            payload: Raw PDF bytes
            document_name: Original filename

        Returns:
            IngestionResult: Chunk count, point IDs and timing

        Raises:
            ExtractionError: Payload is not a readable PDF
            EmbeddingError: Any chunk failed to embed
            DimensionMismatchError: Embeddings do not fit the collection
            VectorStoreError: Qdrant rejected the request
        """
        start_time = time.time()

        await self._vector_store.ensure_collection()

        text = await run_in_threadpool(self._extraction_task.extract, payload, document_name)

        metadata = {"source": document_name} if document_name else {}
        chunks = await run_in_threadpool(self._chunking_task.chunk, text, metadata)

        embedded_chunks = await self._embedding_task.embed(chunks, document_name)

        points = [build_point(chunk) for chunk in embedded_chunks]
        await self._vector_store.upsert(points)

        result = IngestionResult(
            document_name=document_name,
            chunk_count=len(points),
            point_ids=[point.id for point in points],
            processing_time_ms=round((time.time() - start_time) * 1000, 2),
        )
        log_with_context(
            logger,
            logging.INFO,
            "Document ingested",
            document_name=document_name,
            chunk_count=result.chunk_count,
            text_length=len(text),
            processing_time_ms=result.processing_time_ms,
        )
        return result
