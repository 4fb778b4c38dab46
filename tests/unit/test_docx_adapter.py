"""Unit tests for DocxAdapter (real python-docx documents built in memory)."""
import asyncio

import pytest

from docextract.adapters.docx_adapter import DocxAdapter, paragraph_to_markdown
from docextract.domain.enums import DocumentFormat, ExtractionErrorKind
from docextract.domain.errors import MalformedDocumentError


class TestParagraphToMarkdown:
    @pytest.mark.parametrize(
        "style, expected",
        [
            ("Title", "# Text"),
            ("Heading 1", "# Text"),
            ("Heading 3", "### Text"),
            ("Heading 9", "###### Text"),
            ("Heading", "# Text"),
            ("List Bullet", "- Text"),
            ("List Number 2", "- Text"),
            ("Normal", "Text"),
            ("", "Text"),
        ],
    )
    def test_style_mapping(self, style, expected):
        assert paragraph_to_markdown("Text", style) == expected


class TestExtractText:
    def test_renders_headings_lists_and_body(self, docx_bytes):
        result = asyncio.run(DocxAdapter().extract_text(docx_bytes))

        assert result == "# Quarterly Report\n\n## Summary\n\nRevenue grew.\n\n- First item"

    def test_table_rows_kept_in_document_order(self, docx_with_table):
        result = asyncio.run(DocxAdapter().extract_text(docx_with_table))

        assert result == "Intro\n\nAlpha | Beta\n\nGamma | Delta\n\nOutro"

    def test_empty_payload_is_malformed(self):
        with pytest.raises(MalformedDocumentError) as exc_info:
            asyncio.run(DocxAdapter().extract_text(b""))
        assert exc_info.value.kind is ExtractionErrorKind.MALFORMED_DOCUMENT

    def test_non_docx_payload_is_malformed(self):
        with pytest.raises(MalformedDocumentError, match="Not a parseable DOCX"):
            asyncio.run(DocxAdapter().extract_text(b"definitely not a zip archive"))

    def test_media_types(self):
        assert DocxAdapter().media_types() == [DocumentFormat.DOCX.value]
