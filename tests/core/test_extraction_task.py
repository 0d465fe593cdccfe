"""
Test suite for ExtractionTask.

Covers text extraction from generated PDFs and rejection of malformed payloads.
"""

import pytest

from fakes import build_pdf
from policy_assistant.core.document_processing.tasks import ExtractionTask
from policy_assistant.core.exceptions import DocumentProcessingError, ExtractionError


@pytest.fixture
def task() -> ExtractionTask:
    return ExtractionTask()


class TestExtractionTask:
    """Test text extraction from PDF payloads."""

    def test_extract_returns_page_text(self, task: ExtractionTask, policy_pdf: bytes) -> None:
        """Should return the text drawn on the page."""
        text = task.extract(policy_pdf, "policy.pdf")

        assert "The deductible is $500." in text
        assert "Water damage" in text

    def test_extract_rejects_empty_payload(self, task: ExtractionTask) -> None:
        with pytest.raises(ExtractionError, match="empty"):
            task.extract(b"", "empty.pdf")

    def test_extract_rejects_non_pdf_payload(self, task: ExtractionTask) -> None:
        """Should refuse payloads without a PDF header."""
        with pytest.raises(ExtractionError, match="Only PDF"):
            task.extract(b"just some plain text", "notes.txt")

    def test_extract_accepts_bytes_before_header(self, task: ExtractionTask) -> None:
        """Should read PDFs whose header follows a short preamble."""
        payload = b"\x00JUNK\n" + build_pdf(["The deductible is $500."])

        assert "The deductible is $500." in task.extract(payload, "prefixed.pdf")

    def test_extract_rejects_header_past_first_kilobyte(self, task: ExtractionTask) -> None:
        payload = b" " * 1024 + build_pdf(["The deductible is $500."])

        with pytest.raises(ExtractionError, match="Only PDF"):
            task.extract(payload, "padded.pdf")

    def test_extract_rejects_truncated_pdf(self, task: ExtractionTask) -> None:
        """Should raise ExtractionError when the body is not a parseable PDF."""
        with pytest.raises(ExtractionError):
            task.extract(b"%PDF-1.4\nthis is not really a pdf", "broken.pdf")

    def test_extract_rejects_pdf_without_text(self, task: ExtractionTask) -> None:
        blank = build_pdf([])

        with pytest.raises(ExtractionError, match="no extractable text"):
            task.extract(blank, "blank.pdf")

    def test_extraction_error_carries_document_name(self, task: ExtractionTask) -> None:
        with pytest.raises(ExtractionError) as exc_info:
            task.extract(b"plain", "notes.txt")

        assert isinstance(exc_info.value, DocumentProcessingError)
        assert exc_info.value.details["document_name"] == "notes.txt"
