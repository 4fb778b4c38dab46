"""
Concrete implementation of PdfPort using pypdf.

Each call owns a ParserSession (in-memory stream + PdfReader) that is
released exactly once when the `with` block exits, on every path.
CPU-bound parsing runs in a worker thread via asyncio.to_thread().
"""

import asyncio
import io
import logging

from pypdf import PdfReader

from docextract.domain.enums import CleanupFailurePolicy
from docextract.domain.errors import (
    MalformedDocumentError,
    ParserFailureError,
    ResourceCleanupError,
)
from docextract.ports.pdf_port import PdfPort

logger = logging.getLogger(__name__)

_PDF_MAGIC = b"%PDF-"

# Readers accept a header anywhere in the first KiB (leading junk from some generators)
_HEADER_SEARCH_WINDOW = 1024

_PAGE_SEPARATOR = "\n\n"


class ParserSession:
    """A pypdf reader over one payload, scoped to a single extraction call."""

    def __init__(
        self,
        file_bytes: bytes,
        cleanup_policy: CleanupFailurePolicy = CleanupFailurePolicy.WARN,
    ) -> None:
        self._file_bytes = file_bytes
        self._cleanup_policy = cleanup_policy
        self._stream: io.BytesIO | None = None
        self._reader: PdfReader | None = None
        self._released = False

    @property
    def released(self) -> bool:
        return self._released

    def open(self) -> PdfReader:
        """Validate the payload and open a reader over it."""
        if not self._file_bytes:
            raise MalformedDocumentError("Cannot extract text from an empty payload")

        if _PDF_MAGIC not in self._file_bytes[:_HEADER_SEARCH_WINDOW]:
            raise MalformedDocumentError("Payload is not a PDF document (missing %PDF- header)")

        self._stream = io.BytesIO(self._file_bytes)
        self._file_bytes = b""

        try:
            self._reader = PdfReader(self._stream)
        except Exception as exc:
            raise MalformedDocumentError(f"Not a parseable PDF: {exc}") from exc

        return self._reader

    def release(self) -> None:
        """Close the reader and the stream. Later calls are no-ops."""
        if self._released:
            return
        self._released = True
        self._file_bytes = b""

        reader, stream = self._reader, self._stream
        self._reader = None
        self._stream = None
        try:
            if reader is not None:
                reader.close()
        finally:
            if stream is not None:
                stream.close()

    def __enter__(self) -> "ParserSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            self.release()
        except Exception as cleanup_exc:
            if exc is not None:
                # The extraction error is the one the caller needs to see
                logger.error(
                    "Failed to release PDF parser session after %s: %s",
                    type(exc).__name__,
                    cleanup_exc,
                )
                return None

            if self._cleanup_policy is CleanupFailurePolicy.RAISE:
                logger.error("Failed to release PDF parser session: %s", cleanup_exc)
                raise ResourceCleanupError(
                    f"Failed to release PDF parser session: {cleanup_exc}"
                ) from cleanup_exc

            logger.warning(
                "Failed to release PDF parser session, returning extracted text anyway: %s",
                cleanup_exc,
            )
        return None


class PyPdfAdapter(PdfPort):
    """Extracts text from PDF files using pypdf."""

    def __init__(
        self, cleanup_policy: CleanupFailurePolicy = CleanupFailurePolicy.WARN
    ) -> None:
        self._cleanup_policy = CleanupFailurePolicy(cleanup_policy)

    async def extract_text(self, file_bytes: bytes) -> str:
        """Read all pages in a worker thread and concatenate their text."""
        return await asyncio.to_thread(self._extract_sync, file_bytes)

    def _extract_sync(self, file_bytes: bytes) -> str:
        pages: list[str] = []

        with ParserSession(file_bytes, self._cleanup_policy) as session:
            reader = session.open()
            try:
                page_count = len(reader.pages)
                for page in reader.pages:
                    text = page.extract_text()
                    if text and text.strip():
                        pages.append(text.strip())
            except Exception as exc:
                raise ParserFailureError(f"PDF parsing failed: {exc}") from exc

            if page_count == 0:
                raise MalformedDocumentError("PDF document has no pages")

        text = _PAGE_SEPARATOR.join(pages)
        logger.info(
            "Extracted %d chars from %d/%d PDF pages", len(text), len(pages), page_count
        )
        return text
