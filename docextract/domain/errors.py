"""
Error taxonomy for document extraction.

Every extractor failure is an ExtractionError carrying its kind, so callers
can branch on `exc.kind` or catch one of the narrower subclasses.
"""

from docextract.domain.enums import ExtractionErrorKind


class ExtractionError(Exception):
    """Base error raised by every document extractor."""

    kind: ExtractionErrorKind = ExtractionErrorKind.PARSER_FAILURE

    def __init__(self, message: str, kind: ExtractionErrorKind | None = None) -> None:
        super().__init__(message)
        if kind is not None:
            self.kind = kind


class MalformedDocumentError(ExtractionError):
    """Payload is empty or not a document the parser can open."""

    kind = ExtractionErrorKind.MALFORMED_DOCUMENT


class ParserFailureError(ExtractionError):
    """The parser opened the document but failed while reading it."""

    kind = ExtractionErrorKind.PARSER_FAILURE


class ResourceCleanupError(ExtractionError):
    """Releasing the parser session failed."""

    kind = ExtractionErrorKind.RESOURCE_CLEANUP_FAILURE


class UnsupportedDocumentTypeError(ValueError):
    """No extractor is registered for the given MIME type."""

    def __init__(self, mime_type: str, file_name: str) -> None:
        super().__init__(
            f'Unsupported file type "{mime_type}" for file "{file_name}"'
        )
        self.mime_type = mime_type
        self.file_name = file_name
