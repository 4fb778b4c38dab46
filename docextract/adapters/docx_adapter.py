"""
Concrete implementation of DocumentPort for DOCX files using python-docx.

Body blocks are read in document order. Paragraph styles are mapped onto
lightweight Markdown: headings become `#` lines and list paragraphs become
`- ` bullets. Each table row becomes one block of cells joined by " | ".
"""

import asyncio
import io
import logging

from docx import Document
from docx.oxml.ns import qn
from docx.table import Table
from docx.text.paragraph import Paragraph

from docextract.domain.enums import DocumentFormat
from docextract.domain.errors import MalformedDocumentError
from docextract.ports.document_port import DocumentPort

logger = logging.getLogger(__name__)

_MAX_HEADING_LEVEL = 6

_CELL_SEPARATOR = " | "


def _heading_level(style_name: str) -> int | None:
    """'Heading 2' → 2, 'Title' → 1, anything else → None."""
    if style_name == "Title":
        return 1
    if not style_name.startswith("Heading"):
        return None
    suffix = style_name[len("Heading"):].strip()
    if not suffix.isdigit():
        return 1
    return min(max(int(suffix), 1), _MAX_HEADING_LEVEL)


def paragraph_to_markdown(text: str, style_name: str) -> str:
    """Render one stripped paragraph as a Markdown block."""
    level = _heading_level(style_name)
    if level is not None:
        return f"{'#' * level} {text}"
    if style_name.startswith("List"):
        return f"- {text}"
    return text


def table_to_markdown(table: Table) -> list[str]:
    """One block per non-empty row; horizontally merged cells appear once."""
    rows: list[str] = []
    for row in table.rows:
        cells: list[str] = []
        seen = set()
        for cell in row.cells:
            if id(cell._tc) in seen:
                continue
            seen.add(id(cell._tc))
            cells.append(" ".join(cell.text.split()))
        if any(cells):
            rows.append(_CELL_SEPARATOR.join(cells))
    return rows


def body_blocks(doc) -> list[str]:
    """Render the document body (paragraphs and tables) in order."""
    blocks: list[str] = []
    for child in doc.element.body.iterchildren():
        if child.tag == qn("w:p"):
            para = Paragraph(child, doc)
            text = para.text.strip()
            if not text:
                continue
            style_name = para.style.name if para.style is not None else ""
            blocks.append(paragraph_to_markdown(text, style_name or ""))
        elif child.tag == qn("w:tbl"):
            blocks.extend(table_to_markdown(Table(child, doc)))
    return blocks


class DocxAdapter(DocumentPort):
    """Extracts paragraph and table text from DOCX files."""

    async def extract_text(self, file_bytes: bytes) -> str:
        # Offload CPU-bound DOCX parsing to threadpool
        return await asyncio.to_thread(self._extract_sync, file_bytes)

    def media_types(self) -> list[str]:
        return [DocumentFormat.DOCX.value]

    @staticmethod
    def _extract_sync(file_bytes: bytes) -> str:
        if not file_bytes:
            raise MalformedDocumentError("Cannot extract text from an empty payload")

        with io.BytesIO(file_bytes) as stream:
            try:
                doc = Document(stream)
            except Exception as exc:
                raise MalformedDocumentError(f"Not a parseable DOCX: {exc}") from exc

            blocks = body_blocks(doc)

        markdown = "\n\n".join(blocks)
        logger.info("Extracted %d chars from %d DOCX blocks", len(markdown), len(blocks))
        return markdown
