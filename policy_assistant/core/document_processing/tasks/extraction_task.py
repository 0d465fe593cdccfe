"""
Text extraction task using LangChain PyPDFLoader.

Writes the uploaded bytes to a private temp directory, loads every page and
joins the page texts. The temp directory is removed before returning.

Dependencies: langchain_community.document_loaders
System role: First stage of document ingestion pipeline
"""

import tempfile
from pathlib import Path

from langchain_community.document_loaders import PyPDFLoader

from policy_assistant.core.exceptions import ExtractionError

PDF_MAGIC = b"%PDF-"
# Readers accept the header anywhere in the first 1024 bytes.
PDF_HEADER_WINDOW = 1024
TEMP_DIR_PREFIX = "policy_assistant_"


class ExtractionTask:
    """Extract full text from a PDF payload."""

    def __init__(self, page_separator: str = "\n") -> None:
        """
        Initialize extraction task.

        Args:
            page_separator: String inserted between page texts
        """
        self._page_separator = page_separator

    def extract(self, payload: bytes, document_name: str | None = None) -> str:
        """
        Extract text from PDF bytes.

        Args:
            payload: Raw uploaded file content
            document_name: Original filename, used for error context only

        Returns:
            str: Full document text

        Raises:
            ExtractionError: When the payload is not a readable PDF or has no text
        """
        if not payload:
            raise ExtractionError("Uploaded file is empty", document_name)

        if PDF_MAGIC not in payload[:PDF_HEADER_WINDOW]:
            raise ExtractionError(
                "Unsupported file format. Only PDF files are supported.",
                document_name,
            )

        with tempfile.TemporaryDirectory(prefix=TEMP_DIR_PREFIX) as temp_dir:
            file_path = Path(temp_dir) / "upload.pdf"
            file_path.write_bytes(payload)

            try:
                documents = PyPDFLoader(str(file_path)).load()
            except Exception as e:
                raise ExtractionError(f"Failed to parse PDF: {e}", document_name) from e

        text = self._page_separator.join(doc.page_content for doc in documents)
        if not text.strip():
            raise ExtractionError("PDF document contains no extractable text", document_name)

        return text
