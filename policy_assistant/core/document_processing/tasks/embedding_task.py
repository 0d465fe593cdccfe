"""
Embedding generation task.

Embeds every chunk with its own request. Requests run concurrently, capped by
a semaphore; the first failure fails the whole document.

Dependencies: asyncio, policy_assistant.boundary.llm
System role: Third stage of document ingestion pipeline
"""

import asyncio
import logging

from policy_assistant.boundary.llm.embeddings import GeminiEmbedder
from policy_assistant.core.exceptions import EmbeddingError

from ..models import Chunk

logger = logging.getLogger(__name__)


class EmbeddingTask:
    """Generate embeddings for chunks with bounded concurrency."""

    def __init__(self, embedder: GeminiEmbedder, max_concurrency: int = 8) -> None:
        """
        Initialize embedding task.

        Args:
            embedder: Embedding adapter
            max_concurrency: Maximum embedding requests in flight

        Raises:
            ValueError: When max_concurrency is below 1
        """
        if max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")

        self._embedder = embedder
        self._max_concurrency = max_concurrency

    async def embed(self, chunks: list[Chunk], document_name: str | None = None) -> list[Chunk]:
        """
        Embed all chunks.

        Sibling requests already in flight are not cancelled when one fails.

        Args:
            chunks: Chunks to embed
            document_name: Filename for error context

        Returns:
            list[Chunk]: Copies of the chunks with embeddings, in input order

        Raises:
            EmbeddingError: When any embedding request fails
        """
        if not chunks:
            return []

        semaphore = asyncio.Semaphore(self._max_concurrency)

        async def _embed_one(chunk: Chunk) -> Chunk:
            async with semaphore:
                vector = await self._embedder.aembed_document(chunk.content)
            return chunk.model_copy(update={"embedding": vector})

        try:
            embedded = await asyncio.gather(*(_embed_one(chunk) for chunk in chunks))
        except Exception as e:
            raise EmbeddingError(
                f"Failed to generate embeddings: {e}",
                document_name,
                details={"chunk_count": len(chunks)},
            ) from e

        logger.debug(
            "Embedded chunks",
            extra={"chunk_count": len(embedded), "max_concurrency": self._max_concurrency},
        )
        return list(embedded)
