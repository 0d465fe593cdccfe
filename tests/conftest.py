"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory Qdrant store, deterministic fake embedder, generated PDF
payloads, and an application instance for endpoint tests
Dependencies: pytest, qdrant_client, fastapi.testclient
System role: Test infrastructure and fixture management
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from qdrant_client import AsyncQdrantClient

from fakes import TEST_DIMENSION, FakeEmbedder, build_pdf
from policy_assistant.boundary.vdb import QdrantVectorStore
from policy_assistant.configs import Settings, get_settings
from policy_assistant.main import create_app


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reset the cached settings so env overrides take effect per test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def policy_pdf() -> bytes:
    """One-page policy PDF mentioning the deductible."""
    return build_pdf([
        "Home Insurance Policy Summary",
        "The deductible is $500.",
        "Water damage from burst pipes is covered.",
    ])


@pytest.fixture
def fake_embedder() -> FakeEmbedder:
    """Provide deterministic embedder matching the test collection size."""
    return FakeEmbedder()


@pytest.fixture
def memory_store() -> QdrantVectorStore:
    """Provide a vector store backed by a fresh in-memory Qdrant instance."""
    return QdrantVectorStore(
        collection_name="test_policies",
        vector_size=TEST_DIMENSION,
        client=AsyncQdrantClient(location=":memory:"),
    )


@pytest.fixture
def app() -> FastAPI:
    """
    Application with default settings.

    Tests swap collaborators in via dependency_overrides. The lifespan is not
    entered unless a test opts in with a TestClient context.
    """
    return create_app(settings=Settings())


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)
