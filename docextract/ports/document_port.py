"""
Abstract interface for document text extraction (PDF, DOCX, etc.).
"""

from abc import ABC, abstractmethod


class DocumentPort(ABC):
    """Port for extracting text content from a single document format."""

    @abstractmethod
    async def extract_text(self, file_bytes: bytes) -> str:
        """
        Extract all text from a document given its raw bytes.

        Args:
            file_bytes: Raw file content. Not retained after the call.

        Returns:
            Plain text of the document.

        Raises:
            ExtractionError: payload is malformed or the parser failed.
        """
        ...

    @abstractmethod
    def media_types(self) -> list[str]:
        """Return the MIME types this extractor handles."""
        ...
