"""Enums shared across the domain layer."""

from enum import Enum


class ExtractionErrorKind(str, Enum):
    MALFORMED_DOCUMENT = "malformed_document"
    PARSER_FAILURE = "parser_failure"
    RESOURCE_CLEANUP_FAILURE = "resource_cleanup_failure"


class DocumentFormat(str, Enum):
    PDF = "application/pdf"
    DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
    MARKDOWN = "text/markdown"
    PLAIN = "text/plain"


class CleanupFailurePolicy(str, Enum):
    # "warn": keep the extracted text, log the release failure
    # "raise": surface it as RESOURCE_CLEANUP_FAILURE
    WARN = "warn"
    RAISE = "raise"
