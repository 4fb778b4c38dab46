"""Shared fixtures: in-memory PDF and DOCX payloads."""
import io

import pytest
from docx import Document


def build_pdf(pages: list[str]) -> bytes:
    """Write a minimal PDF with one Helvetica text line per page.

    Object layout: 1 catalog, 2 page tree, 3 font, then a (page, content)
    pair per page. Xref offsets are computed from the bytes actually written.
    """
    page_ids = [4 + 2 * i for i in range(len(pages))]
    objs: dict[int, bytes] = {
        1: b"<< /Type /Catalog /Pages 2 0 R >>",
        2: (
            f"<< /Type /Pages /Kids [{' '.join(f'{pid} 0 R' for pid in page_ids)}] "
            f"/Count {len(pages)} >>"
        ).encode(),
        3: b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    }
    for pid, text in zip(page_ids, pages):
        content_id = pid + 1
        objs[pid] = (
            f"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
            f"/Resources << /Font << /F1 3 0 R >> >> /Contents {content_id} 0 R >>"
        ).encode()
        escaped = text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")
        stream = f"BT /F1 24 Tf 72 720 Td ({escaped}) Tj ET".encode("latin-1")
        objs[content_id] = (
            f"<< /Length {len(stream)} >>\nstream\n".encode() + stream + b"\nendstream"
        )

    out = bytearray(b"%PDF-1.4\n")
    offsets: dict[int, int] = {}
    for num in sorted(objs):
        offsets[num] = len(out)
        out += f"{num} 0 obj\n".encode() + objs[num] + b"\nendobj\n"

    xref_pos = len(out)
    size = max(objs) + 1
    out += f"xref\n0 {size}\n".encode()
    out += b"0000000000 65535 f \n"
    for num in range(1, size):
        out += f"{offsets[num]:010d} 00000 n \n".encode()
    out += (
        f"trailer\n<< /Size {size} /Root 1 0 R >>\nstartxref\n{xref_pos}\n%%EOF\n"
    ).encode()
    return bytes(out)


def build_docx() -> bytes:
    doc = Document()
    doc.add_heading("Quarterly Report", 0)
    doc.add_heading("Summary", level=2)
    doc.add_paragraph("Revenue grew.")
    doc.add_paragraph("   ")
    doc.add_paragraph("First item", style="List Bullet")
    buf = io.BytesIO()
    doc.save(buf)
    return buf.getvalue()


@pytest.fixture
def hello_pdf() -> bytes:
    return build_pdf(["Hello World"])


@pytest.fixture
def multi_page_pdf() -> bytes:
    return build_pdf(["First page", "Second page", "Third page"])


@pytest.fixture
def docx_bytes() -> bytes:
    return build_docx()


@pytest.fixture
def no_pages_pdf() -> bytes:
    return build_pdf([])


@pytest.fixture
def blank_page_pdf() -> bytes:
    return build_pdf([""])


@pytest.fixture
def docx_with_table() -> bytes:
    doc = Document()
    doc.add_paragraph("Intro")
    table = doc.add_table(rows=2, cols=2)
    table.cell(0, 0).text = "Alpha"
    table.cell(0, 1).text = "Beta"
    table.cell(1, 0).text = "Gamma"
    table.cell(1, 1).text = "Delta"
    doc.add_paragraph("Outro")
    buf = io.BytesIO()
    doc.save(buf)
    return buf.getvalue()
