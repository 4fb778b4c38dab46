"""
Conversion service — routes an uploaded payload to the extractor for its
MIME type and returns Markdown/plain text.
Depends on ports only (Dependency Inversion).
"""

import logging

from docextract.domain.enums import DocumentFormat
from docextract.domain.errors import MalformedDocumentError, UnsupportedDocumentTypeError
from docextract.ports.document_port import DocumentPort
from docextract.ports.pdf_port import PdfPort

logger = logging.getLogger(__name__)

_TEXT_FORMATS = {DocumentFormat.MARKDOWN.value, DocumentFormat.PLAIN.value}


def normalize_mime_type(mime_type: str | None) -> str:
    """Drop parameters and lowercase: 'Text/Plain; charset=utf-8' → 'text/plain'."""
    if not mime_type:
        return ""
    return mime_type.split(";", 1)[0].strip().lower()


class ConversionService:
    """Dispatches documents to format-specific extractors."""

    def __init__(self, pdf_parser: PdfPort, docx_parser: DocumentPort) -> None:
        self._extractors: dict[str, DocumentPort] = {}
        for extractor in (pdf_parser, docx_parser):
            for media_type in extractor.media_types():
                self._extractors[media_type] = extractor

    def supported_mime_types(self) -> list[str]:
        return sorted([*self._extractors, *_TEXT_FORMATS])

    async def convert_to_markdown(
        self, file_bytes: bytes, mime_type: str | None, file_name: str
    ) -> str:
        """
        Convert a document payload to text.

        Raises:
            UnsupportedDocumentTypeError: no extractor for `mime_type`
            ExtractionError: the extractor rejected or failed on the payload
        """
        media_type = normalize_mime_type(mime_type)

        if media_type in _TEXT_FORMATS:
            return self._decode_text(file_bytes, file_name)

        extractor = self._extractors.get(media_type)
        if extractor is None:
            raise UnsupportedDocumentTypeError(mime_type or "", file_name)

        logger.info("Converting %s (%s, %d bytes)", file_name, media_type, len(file_bytes))
        return await extractor.extract_text(file_bytes)

    @staticmethod
    def _decode_text(file_bytes: bytes, file_name: str) -> str:
        try:
            return file_bytes.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedDocumentError(
                f"File {file_name} is not valid UTF-8 text: {exc}"
            ) from exc
