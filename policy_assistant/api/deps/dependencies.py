"""
Dependency injection container.

One ServiceContainer is built from Settings at startup and stored on
app.state; request handlers receive its members through Depends factories,
which tests replace via dependency_overrides.

Dependencies: fastapi, policy_assistant.configs, policy_assistant.boundary, policy_assistant.core
System role: DI container for service injection
"""

import logging

from fastapi import Depends, Request

from policy_assistant.boundary.llm import GeminiAnswerGenerator, GeminiEmbedder
from policy_assistant.boundary.vdb import QdrantVectorStore
from policy_assistant.configs import Settings
from policy_assistant.core.document_processing import IngestionPipeline
from policy_assistant.core.rag_query import AnswerPipeline

logger = logging.getLogger(__name__)


def _secret(value) -> str | None:
    return value.get_secret_value() if value is not None else None


class ServiceContainer:
    """Process-wide client handles and pipelines, built lazily from settings."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self._embedder: GeminiEmbedder | None = None
        self._generator: GeminiAnswerGenerator | None = None
        self._vector_store: QdrantVectorStore | None = None
        self._ingestion_pipeline: IngestionPipeline | None = None
        self._answer_pipeline: AnswerPipeline | None = None

    @property
    def embedder(self) -> GeminiEmbedder:
        """Get cached embedder."""
        if self._embedder is None:
            gemini = self.settings.gemini
            self._embedder = GeminiEmbedder(
                model=gemini.embedding_model,
                dimension=gemini.embedding_dimension,
                api_key=_secret(gemini.api_key),
            )
        return self._embedder

    @property
    def generator(self) -> GeminiAnswerGenerator:
        """Get cached answer generator."""
        if self._generator is None:
            gemini = self.settings.gemini
            self._generator = GeminiAnswerGenerator(
                model=gemini.generation_model,
                temperature=gemini.temperature,
                api_key=_secret(gemini.api_key),
            )
        return self._generator

    @property
    def vector_store(self) -> QdrantVectorStore:
        """Get cached vector store."""
        if self._vector_store is None:
            qdrant = self.settings.vector_store
            self._vector_store = QdrantVectorStore(
                collection_name=qdrant.collection_name,
                vector_size=self.settings.gemini.embedding_dimension,
                distance=qdrant.distance,
                url=qdrant.url,
                api_key=_secret(qdrant.api_key),
            )
        return self._vector_store

    @property
    def ingestion_pipeline(self) -> IngestionPipeline:
        """Get cached ingestion pipeline."""
        if self._ingestion_pipeline is None:
            self._ingestion_pipeline = IngestionPipeline(
                embedder=self.embedder,
                vector_store=self.vector_store,
                settings=self.settings.ingestion,
            )
        return self._ingestion_pipeline

    @property
    def answer_pipeline(self) -> AnswerPipeline:
        """Get cached answer pipeline."""
        if self._answer_pipeline is None:
            self._answer_pipeline = AnswerPipeline(
                embedder=self.embedder,
                vector_store=self.vector_store,
                generator=self.generator,
                top_k=self.settings.vector_store.top_k,
            )
        return self._answer_pipeline

    def warm_up(self) -> None:
        """Instantiate every client so configuration errors surface at startup."""
        _ = self.ingestion_pipeline
        _ = self.answer_pipeline

    async def aclose(self) -> None:
        """Close network clients and drop cached instances."""
        if self._vector_store is not None:
            await self._vector_store.close()
        self._embedder = None
        self._generator = None
        self._vector_store = None
        self._ingestion_pipeline = None
        self._answer_pipeline = None


def get_service_container(request: Request) -> ServiceContainer:
    """Get the container built during application startup."""
    return request.app.state.services


def get_ingestion_pipeline(
    services: ServiceContainer = Depends(get_service_container),
) -> IngestionPipeline:
    return services.ingestion_pipeline


def get_answer_pipeline(
    services: ServiceContainer = Depends(get_service_container),
) -> AnswerPipeline:
    return services.answer_pipeline


def get_vector_store(
    services: ServiceContainer = Depends(get_service_container),
) -> QdrantVectorStore:
    return services.vector_store
