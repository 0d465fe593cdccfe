"""
Text chunking task using RecursiveCharacterTextSplitter.

Splits document text into overlapping, retrievable chunks.

Dependencies: langchain_text_splitters
System role: Second stage of document ingestion pipeline
"""

from langchain_text_splitters import RecursiveCharacterTextSplitter

from ..models import Chunk


class ChunkingTask:
    """Split text into chunks using RecursiveCharacterTextSplitter."""

    def __init__(
        self,
        chunk_size: int = 1000,
        chunk_overlap: int = 200,
    ) -> None:
        """
        Initialize chunking task with splitter configuration.

        Args:
            chunk_size: Maximum chunk size in characters
            chunk_overlap: Overlap between consecutive chunks
        """
        self._splitter = RecursiveCharacterTextSplitter(
            chunk_size=chunk_size,
            chunk_overlap=chunk_overlap,
            add_start_index=True,
            length_function=len,
        )

    def chunk(self, text: str, metadata: dict | None = None) -> list[Chunk]:
        """
        Split text into chunks.

        Args:
            text: Full document text
            metadata: Metadata copied onto every chunk

        Returns:
            list[Chunk]: Chunks in document order, each tagged with chunk_index

        Raises:
            ValueError: When text is empty
        """
        if not text or not text.strip():
            raise ValueError("No text to chunk")

        documents = self._splitter.create_documents([text], metadatas=[metadata or {}])
        return [
            Chunk(
                content=doc.page_content,
                metadata={**doc.metadata, "chunk_index": index},
            )
            for index, doc in enumerate(documents)
        ]
