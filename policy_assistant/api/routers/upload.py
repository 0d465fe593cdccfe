"""
Document upload endpoint.

Routes: POST /upload

Dependencies: policy_assistant.core.document_processing, policy_assistant.api.deps
System role: Document ingestion HTTP API
"""

import logging

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from fastapi.responses import PlainTextResponse

from policy_assistant.api.deps import get_ingestion_pipeline
from policy_assistant.core.document_processing import IngestionPipeline
from policy_assistant.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

router = APIRouter(tags=["documents"])

UPLOAD_SUCCESS_MESSAGE = "PDF uploaded, embedded, and stored in Qdrant!"
NO_FILE_MESSAGE = "No file uploaded."
UPLOAD_FAILED_MESSAGE = "Error processing file."


@router.post("/upload", response_class=PlainTextResponse)
async def upload_document(
    file: UploadFile | None = File(default=None),
    pipeline: IngestionPipeline = Depends(get_ingestion_pipeline),
) -> str:
    """
    Ingest one PDF sent as multipart field "file".

    Args:
        file: Uploaded file (multipart form)
        pipeline: Injected IngestionPipeline

    Returns:
        str: Plain-text confirmation

    Raises:
        HTTPException(400): No file in the request
        HTTPException(500): Any extraction, embedding or storage failure
    """
    if file is None or not file.filename:
        raise HTTPException(status_code=400, detail=NO_FILE_MESSAGE)

    try:
        payload = await file.read()
        result = await pipeline.process(payload, document_name=file.filename)
    except Exception as e:
        log_exception_with_context(
            logger,
            "Document upload failed",
            e,
            document_name=file.filename,
        )
        raise HTTPException(status_code=500, detail=UPLOAD_FAILED_MESSAGE) from e
    finally:
        await file.close()

    logger.info(
        "Document upload completed",
        extra={"document_name": file.filename, "chunk_count": result.chunk_count},
    )
    return UPLOAD_SUCCESS_MESSAGE
