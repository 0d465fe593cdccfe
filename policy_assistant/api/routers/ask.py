"""
Question answering endpoint.

Routes: POST /ask

Dependencies: policy_assistant.core.rag_query, policy_assistant.api.deps
System role: Question answering HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from policy_assistant.api.deps import get_answer_pipeline
from policy_assistant.core.exceptions import ValidationError
from policy_assistant.core.rag_query import AnswerPipeline
from policy_assistant.models.ask import AskRequest, AskResponse
from policy_assistant.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

router = APIRouter(tags=["ask"])

QUERY_REQUIRED_MESSAGE = "Query is required."
ASK_FAILED_MESSAGE = "Failed to retrieve and answer."


@router.post("/ask", response_model=AskResponse)
async def ask(
    body: AskRequest | None = None,
    pipeline: AnswerPipeline = Depends(get_answer_pipeline),
) -> AskResponse:
    """
    Answer a question from the uploaded documents.

    Args:
        body: AskRequest with the question in "query"
        pipeline: Injected AnswerPipeline

    Returns:
        AskResponse: Handoff text or the model's structured answer

    Raises:
        HTTPException(400): Query missing or blank
        HTTPException(500): Retrieval, generation or parsing failure
    """
    query = body.query if body else None
    if not query or not query.strip():
        raise HTTPException(status_code=400, detail=QUERY_REQUIRED_MESSAGE)

    try:
        message = await pipeline.answer(query)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=QUERY_REQUIRED_MESSAGE) from e
    except Exception as e:
        log_exception_with_context(logger, "Question answering failed", e, query=query)
        raise HTTPException(status_code=500, detail=ASK_FAILED_MESSAGE) from e

    return AskResponse(message=message)
