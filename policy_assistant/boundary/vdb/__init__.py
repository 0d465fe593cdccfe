"""
Vector database boundary.

Exports: QdrantVectorStore, VectorPoint, VectorSearchResult
"""

from policy_assistant.boundary.vdb.qdrant_store import PAYLOAD_TEXT_KEY, QdrantVectorStore
from policy_assistant.boundary.vdb.vector_schemas import VectorPoint, VectorSearchResult

__all__ = [
    "PAYLOAD_TEXT_KEY",
    "QdrantVectorStore",
    "VectorPoint",
    "VectorSearchResult",
]
