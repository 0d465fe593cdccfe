"""
Google Generative AI embeddings with fixed output dimensionality.

Wraps GoogleGenerativeAIEmbeddings so every call requests the same vector
size. The Qdrant collection is created with that size, so a drifting
dimension would make upserts and searches fail.

Dependencies: langchain_google_genai
System role: Embedding generation adapter
"""

import logging

from langchain_google_genai import GoogleGenerativeAIEmbeddings

logger = logging.getLogger(__name__)

DOCUMENT_TASK_TYPE = "RETRIEVAL_DOCUMENT"
QUERY_TASK_TYPE = "RETRIEVAL_QUERY"


class GeminiEmbedder:
    """
    Gemini embedding generator with a fixed output dimension.

    The underlying client is injectable so tests can pass a stub.
    """

    def __init__(
        self,
        model: str = "models/gemini-embedding-001",
        dimension: int = 768,
        api_key: str | None = None,
        client: GoogleGenerativeAIEmbeddings | None = None,
    ) -> None:
        """
        Initialize embeddings client.

        Args:
            model: Google embedding model ID
            dimension: Output dimensionality requested on every call
            api_key: Gemini API key (GOOGLE_API_KEY env var is used if None)
            client: Pre-built embeddings client
        """
        self._model = model
        self._dimension = dimension

        if client is None:
            kwargs = {"google_api_key": api_key} if api_key else {}
            client = GoogleGenerativeAIEmbeddings(model=model, **kwargs)
        self._client = client

        logger.info(
            f"{__name__}:__init__ - Initialized with model={model}, "
            f"output_dimensionality={dimension}"
        )

    @property
    def dimension(self) -> int:
        """Vector size produced by this embedder."""
        return self._dimension

    async def aembed_document(self, text: str) -> list[float]:
        """
        Embed one chunk of document text.

        Args:
            text: Chunk content

        Returns:
            list[float]: Embedding vector
        """
        vector = await self._client.aembed_query(
            text,
            task_type=DOCUMENT_TASK_TYPE,
            output_dimensionality=self._dimension,
        )
        return list(vector)

    async def aembed_query(self, text: str) -> list[float]:
        """
        Embed a user question.

        Args:
            text: Question text

        Returns:
            list[float]: Embedding vector
        """
        vector = await self._client.aembed_query(
            text,
            task_type=QUERY_TASK_TYPE,
            output_dimensionality=self._dimension,
        )
        return list(vector)
