"""Gemini API adapters."""

from policy_assistant.boundary.llm.embeddings import GeminiEmbedder
from policy_assistant.boundary.llm.generator import GeminiAnswerGenerator

__all__ = ["GeminiEmbedder", "GeminiAnswerGenerator"]
