"""
Document endpoints — thin HTTP layer, delegates all logic to services.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import JSONResponse
from starlette.datastructures import UploadFile

from docextract.config import Settings
from docextract.dependencies import get_conversion_service, get_settings
from docextract.domain.errors import ExtractionError, UnsupportedDocumentTypeError
from docextract.domain.models import ConversionErrorResponse, ConversionResult
from docextract.services.conversion_service import ConversionService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/documents", tags=["Documents"])


@router.post(
    "/convert",
    response_model=ConversionResult,
    status_code=status.HTTP_200_OK,
    responses={
        status.HTTP_415_UNSUPPORTED_MEDIA_TYPE: {"model": ConversionErrorResponse},
        status.HTTP_422_UNPROCESSABLE_ENTITY: {"model": ConversionErrorResponse},
    },
)
async def convert_document(
    request: Request,
    svc: ConversionService = Depends(get_conversion_service),
    cfg: Settings = Depends(get_settings),
):
    """Upload a PDF, DOCX, Markdown or plain-text file (multipart field `file`) → extracted text."""

    # A part with an empty filename is parsed as a plain string field
    async with request.form() as form:
        file = form.get("file")
        if file is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="No file provided",
            )
        if not isinstance(file, UploadFile) or not file.filename:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Filename is required",
            )
        file_name = file.filename
        content_type = file.content_type
        file_bytes = await file.read()

    if not file_bytes:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Empty file uploaded",
        )
    if len(file_bytes) > cfg.max_upload_bytes:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"File exceeds the {cfg.max_upload_mb}MB upload limit",
        )

    mime_type = content_type or "application/octet-stream"

    try:
        content_md = await svc.convert_to_markdown(file_bytes, mime_type, file_name)
    except UnsupportedDocumentTypeError as exc:
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail=f"Conversion failed: {exc}",
        )
    except ExtractionError as exc:
        logger.warning("Conversion of %s failed (%s): %s", file_name, exc.kind.value, exc)
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=ConversionErrorResponse(
                detail=f"Conversion failed: {exc}", error=exc.kind
            ).model_dump(mode="json"),
        )

    return ConversionResult(
        file_name=file_name,
        mime_type=mime_type,
        content_md=content_md,
        characters_extracted=len(content_md),
    )
