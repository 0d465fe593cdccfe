"""
Policy PDF assistant.

Upload a PDF, index it in Qdrant with Gemini embeddings, and ask questions
answered from the retrieved context.
"""

__version__ = "0.1.0"
