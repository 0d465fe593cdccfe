"""
Boundary layer.

Adapters for external services: Qdrant vector store and Gemini APIs.
"""
