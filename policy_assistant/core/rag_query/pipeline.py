"""
Answer pipeline orchestrator.

Embeds the question, retrieves the top-k chunks from the shared collection,
asks Gemini for a JSON answer restricted to that context, and post-processes
the output.

Dependencies: policy_assistant.boundary, policy_assistant.core.rag_query
System role: Question answering orchestration
"""

import logging
from typing import Any

from policy_assistant.boundary.llm.embeddings import GeminiEmbedder
from policy_assistant.boundary.llm.generator import GeminiAnswerGenerator
from policy_assistant.boundary.vdb import QdrantVectorStore, VectorSearchResult
from policy_assistant.core.exceptions import ValidationError
from policy_assistant.core.rag_query.prompt import build_answer_messages
from policy_assistant.core.rag_query.response_parser import parse_answer
from policy_assistant.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


def build_context(results: list[VectorSearchResult]) -> str:
    """Join retrieved chunk texts in ranking order, one per line."""
    return "\n".join(result.content for result in results)


class AnswerPipeline:
    """Retrieve-then-generate question answering."""

    def __init__(
        self,
        embedder: GeminiEmbedder,
        vector_store: QdrantVectorStore,
        generator: GeminiAnswerGenerator,
        top_k: int = 5,
    ) -> None:
        self._embedder = embedder
        self._vector_store = vector_store
        self._generator = generator
        self._top_k = top_k

    async def answer(self, query: str | None) -> Any:
        """
        Answer a question from the stored documents.

        Args:
            query: User question

        Returns:
            The fixed handoff string, or the model's decoded JSON answer

        Raises:
            ValidationError: Query is missing or blank
            ResponseParseError: Model output is not valid JSON
        """
        if not query or not query.strip():
            raise ValidationError("Query is required.", field="query")

        vector = await self._embedder.aembed_query(query)
        results = await self._vector_store.search(vector, top_k=self._top_k)
        context = build_context(results)

        log_with_context(
            logger,
            logging.INFO,
            "Retrieved context",
            query_length=len(query),
            hit_count=len(results),
            top_score=results[0].score if results else None,
            context_length=len(context),
        )

        raw_text = await self._generator.agenerate(build_answer_messages(context, query))
        return parse_answer(raw_text)
