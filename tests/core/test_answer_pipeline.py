"""
Test suite for AnswerPipeline.

Tests context assembly, prompt construction and output handling with mocked
collaborators, plus one retrieval run against in-memory Qdrant.

Dependencies: pytest, pytest-asyncio, unittest.mock, langchain_core
System role: Question answering verification
"""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest
from langchain_core.messages import BaseMessage

from fakes import FakeEmbedder
from policy_assistant.boundary.vdb import (
    PAYLOAD_TEXT_KEY,
    QdrantVectorStore,
    VectorPoint,
    VectorSearchResult,
)
from policy_assistant.core.exceptions import ResponseParseError, ValidationError
from policy_assistant.core.rag_query import AnswerPipeline
from policy_assistant.core.rag_query.pipeline import build_context
from policy_assistant.core.rag_query.prompt import FALLBACK_SENTENCE, build_answer_messages
from policy_assistant.core.rag_query.response_parser import HUMAN_HANDOFF_MESSAGE


def make_result(content: str, score: float) -> VectorSearchResult:
    return VectorSearchResult(
        point_id=f"id-{score}",
        content=content,
        score=score,
        payload={PAYLOAD_TEXT_KEY: content},
    )


@pytest.fixture
def mock_embedder() -> MagicMock:
    embedder = MagicMock()
    embedder.aembed_query = AsyncMock(return_value=[0.1] * 8)
    return embedder


@pytest.fixture
def mock_store() -> MagicMock:
    store = MagicMock()
    store.search = AsyncMock(return_value=[
        make_result("The deductible is $500.", 0.9),
        make_result("Water damage from burst pipes is covered.", 0.8),
    ])
    return store


@pytest.fixture
def mock_generator() -> MagicMock:
    generator = MagicMock()
    generator.agenerate = AsyncMock(return_value='{"answer": "$500"}')
    return generator


@pytest.fixture
def pipeline(mock_embedder, mock_store, mock_generator) -> AnswerPipeline:
    return AnswerPipeline(
        embedder=mock_embedder,
        vector_store=mock_store,
        generator=mock_generator,
        top_k=5,
    )


class TestBuildContext:
    """Test context block assembly."""

    def test_joins_in_ranking_order(self) -> None:
        results = [make_result("first", 0.9), make_result("second", 0.5)]

        assert build_context(results) == "first\nsecond"

    def test_duplicates_are_kept(self) -> None:
        results = [make_result("same", 0.9), make_result("same", 0.9)]

        assert build_context(results) == "same\nsame"

    def test_no_results_gives_empty_context(self) -> None:
        assert build_context([]) == ""


class TestAnswerPrompt:
    """Test prompt rendering."""

    def test_system_message_holds_instruction_and_context(self) -> None:
        messages = build_answer_messages("The deductible is $500.", "What is my deductible?")

        assert [message.type for message in messages] == ["system", "human"]
        assert FALLBACK_SENTENCE in messages[0].content
        assert "The deductible is $500." in messages[0].content
        assert "JSON" in messages[0].content
        assert messages[1].content == "What is my deductible?"


class TestAnswerPipeline:
    """Test retrieve-then-generate flow."""

    @pytest.mark.asyncio
    async def test_answer_returns_decoded_json(
        self, pipeline: AnswerPipeline, mock_embedder, mock_store
    ) -> None:
        """Should embed the query, search top-k and decode the JSON answer."""
        result = await pipeline.answer("What is my deductible?")

        assert result == {"answer": "$500"}
        mock_embedder.aembed_query.assert_awaited_once_with("What is my deductible?")
        mock_store.search.assert_awaited_once_with([0.1] * 8, top_k=5)

    @pytest.mark.asyncio
    async def test_generator_receives_context_in_order(
        self, pipeline: AnswerPipeline, mock_generator
    ) -> None:
        await pipeline.answer("What is my deductible?")

        messages: list[BaseMessage] = mock_generator.agenerate.await_args.args[0]
        expected_context = "The deductible is $500.\nWater damage from burst pipes is covered."
        assert expected_context in messages[0].content
        assert messages[-1].content == "What is my deductible?"

    @pytest.mark.asyncio
    async def test_fallback_output_returns_handoff(
        self, pipeline: AnswerPipeline, mock_generator
    ) -> None:
        mock_generator.agenerate.return_value = json.dumps({"answer": FALLBACK_SENTENCE})

        assert await pipeline.answer("Is flood covered?") == HUMAN_HANDOFF_MESSAGE

    @pytest.mark.asyncio
    async def test_unparseable_output_raises(
        self, pipeline: AnswerPipeline, mock_generator
    ) -> None:
        mock_generator.agenerate.return_value = "The deductible is $500."

        with pytest.raises(ResponseParseError):
            await pipeline.answer("What is my deductible?")

    @pytest.mark.parametrize("query", ["", "   ", None])
    @pytest.mark.asyncio
    async def test_blank_query_is_rejected(
        self, pipeline: AnswerPipeline, mock_embedder, query
    ) -> None:
        """Should raise before any external call is made."""
        with pytest.raises(ValidationError):
            await pipeline.answer(query)

        mock_embedder.aembed_query.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_answer_uses_stored_chunks(
        self,
        fake_embedder: FakeEmbedder,
        memory_store: QdrantVectorStore,
        mock_generator,
    ) -> None:
        """Context should contain the stored chunk nearest to the question."""
        chunk_text = "The deductible is $500."
        await memory_store.ensure_collection()
        await memory_store.upsert([
            VectorPoint(
                id="6f1c1d52-27f3-4c2a-9d64-6c9f4a1f2b10",
                vector=fake_embedder.vector_for(chunk_text),
                payload={PAYLOAD_TEXT_KEY: chunk_text},
            )
        ])
        pipeline = AnswerPipeline(
            embedder=fake_embedder,
            vector_store=memory_store,
            generator=mock_generator,
        )

        await pipeline.answer(chunk_text)

        messages = mock_generator.agenerate.await_args.args[0]
        assert chunk_text in messages[0].content
        assert fake_embedder.query_calls == [chunk_text]
