"""
Answer post-processing.

Detects "I don't know" answers by phrase matching before attempting to parse
the structured output.

Dependencies: json (stdlib)
System role: Model output interpretation
"""

import json
from typing import Any

from policy_assistant.core.exceptions import ResponseParseError

FALLBACK_PHRASES = ("not sure", "connect you to a human")

HUMAN_HANDOFF_MESSAGE = (
    "I'm not sure, let me connect you to a human agent for further assistance."
)


def is_fallback_response(raw_text: str) -> bool:
    """Return True if the text contains any fallback phrase, ignoring case."""
    lowered = raw_text.lower()
    return any(phrase in lowered for phrase in FALLBACK_PHRASES)


def parse_answer(raw_text: str) -> Any:
    """
    Turn raw model output into the response message.

    Args:
        raw_text: Model output, expected to be JSON

    Returns:
        The handoff string for fallback answers, otherwise the decoded JSON value

    Raises:
        ResponseParseError: When the text is not valid JSON
    """
    if is_fallback_response(raw_text):
        return HUMAN_HANDOFF_MESSAGE

    try:
        return json.loads(raw_text)
    except json.JSONDecodeError as e:
        raise ResponseParseError(raw_text) from e
