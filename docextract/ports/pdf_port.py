"""
Abstract interface for PDF text extraction.
"""

from abc import abstractmethod

from docextract.domain.enums import DocumentFormat
from docextract.ports.document_port import DocumentPort


class PdfPort(DocumentPort):
    """Port for extracting text content from PDF files."""

    @abstractmethod
    async def extract_text(self, file_bytes: bytes) -> str:
        """
        Extract all text from a PDF given its raw bytes.
        Returns text from all pages, concatenated in document order.

        The parser session opened for the call is released before this
        returns, whether extraction succeeded or not.
        """
        ...

    def media_types(self) -> list[str]:
        return [DocumentFormat.PDF.value]
