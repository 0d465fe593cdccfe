"""
End-to-end flow over HTTP: upload a policy PDF, then ask about it.

Both pipelines share one in-memory Qdrant collection and the deterministic
embedder; only the chat model is stubbed.

Dependencies: pytest, pytest-asyncio, httpx, qdrant_client
System role: Upload and ask wiring verification
"""

import json
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from policy_assistant.api.deps import get_answer_pipeline, get_ingestion_pipeline
from policy_assistant.core.document_processing import IngestionPipeline
from policy_assistant.core.rag_query import AnswerPipeline
from policy_assistant.core.rag_query.response_parser import HUMAN_HANDOFF_MESSAGE


def context_echo_generator() -> MagicMock:
    """Chat model stand-in that answers with the retrieved context it was given."""

    async def _generate(messages):
        _, context = messages[0].content.split("Context:\n", 1)
        return json.dumps({"context": context})

    generator = MagicMock()
    generator.agenerate = AsyncMock(side_effect=_generate)
    return generator


@pytest.fixture
def generator() -> MagicMock:
    return context_echo_generator()


@pytest.fixture
def wired_app(app, fake_embedder, memory_store, generator):
    ingestion = IngestionPipeline(embedder=fake_embedder, vector_store=memory_store)
    answering = AnswerPipeline(
        embedder=fake_embedder,
        vector_store=memory_store,
        generator=generator,
    )
    app.dependency_overrides[get_ingestion_pipeline] = lambda: ingestion
    app.dependency_overrides[get_answer_pipeline] = lambda: answering
    return app


class TestUploadThenAsk:
    """Test a question is answered from a previously uploaded PDF."""

    @pytest.mark.asyncio
    async def test_answer_context_comes_from_uploaded_pdf(self, wired_app, policy_pdf) -> None:
        transport = httpx.ASGITransport(app=wired_app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            upload = await client.post(
                "/upload",
                files={"file": ("policy.pdf", policy_pdf, "application/pdf")},
            )
            answer = await client.post("/ask", json={"query": "What is my deductible?"})

        assert upload.status_code == 200
        assert upload.text == "PDF uploaded, embedded, and stored in Qdrant!"
        assert answer.status_code == 200
        assert "The deductible is $500." in answer.json()["message"]["context"]

    @pytest.mark.asyncio
    async def test_fallback_answer_after_upload(
        self, wired_app, generator, policy_pdf
    ) -> None:
        generator.agenerate = AsyncMock(
            return_value='{"answer": "I\'m not sure, let me connect you to a human agent."}'
        )

        transport = httpx.ASGITransport(app=wired_app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            await client.post(
                "/upload",
                files={"file": ("policy.pdf", policy_pdf, "application/pdf")},
            )
            answer = await client.post("/ask", json={"query": "Is my car covered?"})

        assert answer.status_code == 200
        assert answer.json() == {"message": HUMAN_HANDOFF_MESSAGE}
