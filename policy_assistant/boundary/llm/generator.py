"""
Gemini answer generator.

Invokes a Gemini chat model in JSON response mode and returns the raw text.
Parsing and fallback handling belong to the answer pipeline.

Dependencies: langchain_google_genai, langchain_core
System role: Answer synthesis adapter
"""

import logging
from collections.abc import Sequence

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import BaseMessage
from langchain_google_genai import ChatGoogleGenerativeAI

from policy_assistant.core.exceptions import GenerationError

logger = logging.getLogger(__name__)

JSON_MIME_TYPE = "application/json"


def message_text(message: BaseMessage) -> str:
    """Flatten message content (plain string or list of parts) into text."""
    content = message.content
    if isinstance(content, str):
        return content
    parts = []
    for part in content:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type", "text") == "text":
            parts.append(part.get("text", ""))
    return "".join(parts)


class GeminiAnswerGenerator:
    """Structured-output answer generator backed by ChatGoogleGenerativeAI."""

    def __init__(
        self,
        model: str = "gemini-2.0-flash",
        temperature: float = 0.0,
        api_key: str | None = None,
        chat_model: BaseChatModel | None = None,
    ) -> None:
        """
        Initialize the chat model.

        Args:
            model: Gemini model ID
            temperature: Sampling temperature
            api_key: Gemini API key (GOOGLE_API_KEY env var is used if None)
            chat_model: Pre-built chat model
        """
        if chat_model is None:
            kwargs = {"google_api_key": api_key} if api_key else {}
            chat_model = ChatGoogleGenerativeAI(
                model=model,
                temperature=temperature,
                response_mime_type=JSON_MIME_TYPE,
                **kwargs,
            )
        self._model = chat_model
        self._model_name = model

    async def agenerate(self, messages: Sequence[BaseMessage]) -> str:
        """
        Generate a raw answer for the prepared prompt messages.

        Args:
            messages: System instruction with context, followed by the question

        Returns:
            str: Raw model output

        Raises:
            GenerationError: When the model call fails
        """
        try:
            response = await self._model.ainvoke(list(messages))
        except Exception as e:
            raise GenerationError(
                f"Answer generation failed: {e}",
                details={"model": self._model_name},
            ) from e

        text = message_text(response)
        logger.debug(
            "Generated answer",
            extra={"model": self._model_name, "response_length": len(text)},
        )
        return text
