"""
Health check API endpoints.

Routes: GET /health, GET /health/vector-store

Dependencies: policy_assistant.boundary
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends, HTTPException

from policy_assistant.api.deps import get_vector_store
from policy_assistant.boundary.vdb import QdrantVectorStore
from policy_assistant.models.health import HealthResponse

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/vector-store", response_model=HealthResponse)
async def health_check_vector_store(
    vector_store: QdrantVectorStore = Depends(get_vector_store),
) -> HealthResponse:
    """Vector store health check."""
    if not await vector_store.is_reachable():
        raise HTTPException(status_code=503, detail="Vector store unreachable")
    return HealthResponse(status="healthy", message="Vector store accessible")
