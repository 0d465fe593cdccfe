"""API-specific dependencies."""

from .dependencies import (
    ServiceContainer,
    get_answer_pipeline,
    get_ingestion_pipeline,
    get_service_container,
    get_vector_store,
)

__all__ = [
    "ServiceContainer",
    "get_answer_pipeline",
    "get_ingestion_pipeline",
    "get_service_container",
    "get_vector_store",
]
