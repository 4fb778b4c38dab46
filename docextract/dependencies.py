"""
Dependency Injection container.

Wires abstract ports → concrete adapters. To swap a parser
(e.g., pypdf → another PDF library), change the adapter instantiation here.
"""

from functools import lru_cache

from fastapi import Depends

from docextract.adapters.docx_adapter import DocxAdapter
from docextract.adapters.pypdf_adapter import PyPdfAdapter
from docextract.config import Settings, settings
from docextract.ports.document_port import DocumentPort
from docextract.ports.pdf_port import PdfPort
from docextract.services.conversion_service import ConversionService


# ── Singletons (cached) ──────────────────────────────────────


@lru_cache(maxsize=1)
def _get_pdf_adapter() -> PyPdfAdapter:
    return PyPdfAdapter(cleanup_policy=settings.cleanup_failure_policy)


@lru_cache(maxsize=1)
def _get_docx_adapter() -> DocxAdapter:
    return DocxAdapter()


# ── FastAPI Dependencies (return abstract types) ──────────────


def get_settings() -> Settings:
    """Inject application settings."""
    return settings


def get_pdf_parser() -> PdfPort:
    """Inject the PDF text extractor."""
    return _get_pdf_adapter()


def get_docx_parser() -> DocumentPort:
    """Inject the DOCX text extractor."""
    return _get_docx_adapter()


# ── Domain Services ───────────────────────────────────────────


def get_conversion_service(
    pdf_parser: PdfPort = Depends(get_pdf_parser),
    docx_parser: DocumentPort = Depends(get_docx_parser),
) -> ConversionService:
    """Injects the format extractors into the conversion service."""
    return ConversionService(pdf_parser=pdf_parser, docx_parser=docx_parser)
