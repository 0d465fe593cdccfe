"""
Document ingestion pipeline.

Extract -> chunk -> embed -> upsert for one uploaded PDF.
"""

from policy_assistant.core.document_processing.pipeline import IngestionPipeline

__all__ = ["IngestionPipeline"]
