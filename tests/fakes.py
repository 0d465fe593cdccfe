"""
Test doubles and payload builders shared across the suite.

Dependencies: hashlib (stdlib)
System role: Deterministic stand-ins for external services
"""

import hashlib

TEST_DIMENSION = 8


def build_pdf(lines: list[str]) -> bytes:
    """
    Build a one-page PDF whose text layer contains the given lines.

    Args:
        lines: Text lines drawn top to bottom in Helvetica

    Returns:
        bytes: Complete PDF file with a valid xref table
    """
    operations = ["BT", "/F1 12 Tf", "14 TL", "72 720 Td"]
    for line in lines:
        escaped = line.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")
        operations.append(f"({escaped}) Tj T*")
    operations.append("ET")
    stream = "\n".join(operations).encode("latin-1")

    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
        b"/Resources << /Font << /F1 5 0 R >> >> /Contents 4 0 R >>",
        b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]

    pdf = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(pdf))
        pdf += b"%d 0 obj\n" % number + body + b"\nendobj\n"

    xref_position = len(pdf)
    pdf += b"xref\n0 %d\n" % (len(objects) + 1)
    pdf += b"0000000000 65535 f \n"
    for offset in offsets:
        pdf += b"%010d 00000 n \n" % offset
    pdf += b"trailer\n<< /Size %d /Root 1 0 R >>\n" % (len(objects) + 1)
    pdf += b"startxref\n%d\n%%%%EOF\n" % xref_position
    return bytes(pdf)


class FakeEmbedder:
    """Deterministic embedder: identical text always maps to the same vector."""

    def __init__(self, dimension: int = TEST_DIMENSION) -> None:
        self.dimension = dimension
        self.document_calls: list[str] = []
        self.query_calls: list[str] = []

    def vector_for(self, text: str) -> list[float]:
        digest = hashlib.sha256(text.encode("utf-8")).digest()
        return [byte / 255 + 0.01 for byte in digest[: self.dimension]]

    async def aembed_document(self, text: str) -> list[float]:
        self.document_calls.append(text)
        return self.vector_for(text)

    async def aembed_query(self, text: str) -> list[float]:
        self.query_calls.append(text)
        return self.vector_for(text)
