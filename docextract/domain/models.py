"""
Pydantic models for requests and responses.
Pure data — no I/O, no side effects.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from docextract.domain.enums import ExtractionErrorKind


class ConversionResult(BaseModel):
    """Response for POST /documents/convert."""

    file_name: str
    mime_type: str
    content_md: str
    characters_extracted: int = Field(..., ge=0)


class ConversionErrorResponse(BaseModel):
    """Body returned when a payload cannot be converted."""

    detail: str
    error: ExtractionErrorKind | None = None


class HealthResponse(BaseModel):
    status: str = "ok"
    service: str
