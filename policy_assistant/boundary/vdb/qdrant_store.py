"""
Qdrant vector store.

Owns the single shared collection: lazy creation, bulk upsert and top-k
search. Vector sizes are validated before any write or query reaches Qdrant.

Dependencies: qdrant_client, policy_assistant.boundary.vdb.vector_schemas
System role: Vector storage and retrieval for RAG
"""

import logging

from qdrant_client import AsyncQdrantClient, models

from policy_assistant.boundary.vdb.vector_schemas import VectorPoint, VectorSearchResult
from policy_assistant.core.exceptions import DimensionMismatchError, VectorStoreError

logger = logging.getLogger(__name__)

PAYLOAD_TEXT_KEY = "page_content"


class QdrantVectorStore:
    """
    Qdrant collection wrapper.

    Every document shares one collection; there is no per-session filtering.
    """

    def __init__(
        self,
        collection_name: str,
        vector_size: int,
        distance: str = "Cosine",
        url: str | None = None,
        api_key: str | None = None,
        client: AsyncQdrantClient | None = None,
    ) -> None:
        """
        Initialize the store.

        Args:
            collection_name: Collection holding all points
            vector_size: Dimensionality of every stored vector
            distance: Qdrant distance name (Cosine, Dot, Euclid, Manhattan)
            url: Qdrant REST endpoint, ignored when client is given
            api_key: Optional Qdrant API key
            client: Pre-built async client (e.g. in-memory for tests)

        Raises:
            ValueError: When collection_name is empty or vector_size not positive
        """
        if not collection_name:
            raise ValueError("collection_name cannot be empty")
        if vector_size <= 0:
            raise ValueError("vector_size must be positive")

        self._collection = collection_name
        self._vector_size = vector_size
        self._distance = models.Distance(distance)
        self._client = client or AsyncQdrantClient(url=url, api_key=api_key)

    @property
    def collection_name(self) -> str:
        return self._collection

    @property
    def vector_size(self) -> int:
        return self._vector_size

    def _check_dimension(self, vector: list[float]) -> None:
        if len(vector) != self._vector_size:
            raise DimensionMismatchError(
                expected=self._vector_size,
                actual=len(vector),
                collection=self._collection,
            )

    async def ensure_collection(self) -> bool:
        """
        Create the collection if it does not exist yet.

        Two uploads racing past the existence check may both attempt creation;
        the loser re-checks and accepts the collection the winner created.

        Returns:
            bool: True if the collection was created by this call

        Raises:
            DimensionMismatchError: Existing collection has a different size
            VectorStoreError: When Qdrant cannot be reached
        """
        try:
            if await self._client.collection_exists(self._collection):
                info = await self._client.get_collection(self._collection)
                vectors = info.config.params.vectors
                if isinstance(vectors, models.VectorParams) and vectors.size != self._vector_size:
                    raise DimensionMismatchError(
                        expected=self._vector_size,
                        actual=vectors.size,
                        collection=self._collection,
                    )
                return False

            try:
                await self._client.create_collection(
                    collection_name=self._collection,
                    vectors_config=models.VectorParams(
                        size=self._vector_size,
                        distance=self._distance,
                    ),
                )
            except Exception:
                if await self._client.collection_exists(self._collection):
                    return False
                raise

            logger.info(
                "Created vector collection",
                extra={
                    "collection": self._collection,
                    "vector_size": self._vector_size,
                    "distance": self._distance.value,
                },
            )
            return True

        except DimensionMismatchError:
            raise
        except Exception as e:
            raise VectorStoreError(
                f"Failed to ensure collection: {e}",
                operation="ensure_collection",
                details={"collection": self._collection},
            ) from e

    async def upsert(self, points: list[VectorPoint]) -> None:
        """
        Write all points in one call and wait for Qdrant to acknowledge.

        Args:
            points: Points to write

        Raises:
            DimensionMismatchError: When any vector has the wrong size
            VectorStoreError: When the write fails
        """
        if not points:
            return

        for point in points:
            self._check_dimension(point.vector)

        try:
            await self._client.upsert(
                collection_name=self._collection,
                points=[
                    models.PointStruct(id=p.id, vector=p.vector, payload=p.payload)
                    for p in points
                ],
                wait=True,
            )
        except Exception as e:
            raise VectorStoreError(
                f"Failed to upsert points: {e}",
                operation="upsert",
                details={"collection": self._collection, "point_count": len(points)},
            ) from e

        logger.info(
            "Upserted points",
            extra={"collection": self._collection, "point_count": len(points)},
        )

    async def search(self, vector: list[float], top_k: int = 5) -> list[VectorSearchResult]:
        """
        Return the top_k nearest points in Qdrant's ranking order.

        Args:
            vector: Query embedding
            top_k: Number of results

        Returns:
            list[VectorSearchResult]: Ranked results

        Raises:
            DimensionMismatchError: When the query vector has the wrong size
            VectorStoreError: When the query fails
        """
        self._check_dimension(vector)

        try:
            response = await self._client.query_points(
                collection_name=self._collection,
                query=vector,
                limit=top_k,
                with_payload=True,
            )
        except Exception as e:
            raise VectorStoreError(
                f"Failed to search collection: {e}",
                operation="search",
                details={"collection": self._collection, "top_k": top_k},
            ) from e

        results = []
        for point in response.points:
            payload = point.payload or {}
            results.append(
                VectorSearchResult(
                    point_id=str(point.id),
                    content=payload.get(PAYLOAD_TEXT_KEY, ""),
                    score=point.score,
                    payload=payload,
                )
            )
        return results

    async def count(self) -> int:
        """Exact number of points in the collection."""
        try:
            result = await self._client.count(collection_name=self._collection, exact=True)
        except Exception as e:
            raise VectorStoreError(
                f"Failed to count points: {e}",
                operation="count",
                details={"collection": self._collection},
            ) from e
        return result.count

    async def is_reachable(self) -> bool:
        """Probe Qdrant with a cheap existence check."""
        try:
            await self._client.collection_exists(self._collection)
        except Exception as e:
            logger.warning(
                "Vector store unreachable",
                extra={"collection": self._collection, "error": str(e)},
            )
            return False
        return True

    async def close(self) -> None:
        await self._client.close()
