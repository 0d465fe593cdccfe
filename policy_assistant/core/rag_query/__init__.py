"""
Question answering over the shared collection.

Embed the question, retrieve the nearest chunks, and let Gemini answer.
"""

from policy_assistant.core.rag_query.pipeline import AnswerPipeline

__all__ = ["AnswerPipeline"]
