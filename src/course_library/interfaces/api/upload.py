"""Document upload endpoint."""

from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile

from ...modules.common.constants import UPLOAD_FIELD_NAME
from ...modules.common.schemas import ErrorResponse
from ...modules.document.schemas import UploadResponse
from ...modules.document.services import IncomingFile, UploadService
from .dependencies import get_upload_service

router = APIRouter(tags=["Documents"])


@router.post(
    "/upload",
    response_model=UploadResponse,
    summary="Upload PDF Documents",
    description="""
    Stores one or more PDF files under a (subject, type, year) catalog path.

    - **subject**: Course identifier, e.g. `analyse-numerique`
    - **type**: Document type (`cours`, `td`, `tp`, `exam`)
    - **year**: Four-digit year
    - **pdfs**: One or more files, each declared as `application/pdf` or named `*.pdf`, at most 50 MB

    Filenames are sanitized before storage; an existing file with the same
    stored name is overwritten. The request is all-or-nothing: when one file
    is rejected, none of them is stored.
    """,
    responses={
        200: {"description": "Files stored"},
        400: {"model": ErrorResponse, "description": "Missing field, non-PDF file, file too large or no file"},
        500: {"model": ErrorResponse, "description": "Storage failure"},
    },
)
async def upload_documents(
    subject: Annotated[Optional[str], Form()] = None,
    document_type: Annotated[Optional[str], Form(alias="type")] = None,
    year: Annotated[Optional[str], Form()] = None,
    pdfs: Annotated[Optional[List[UploadFile]], File(alias=UPLOAD_FIELD_NAME)] = None,
    upload_service: UploadService = Depends(get_upload_service),
) -> UploadResponse:
    """Upload PDFs for one catalog path."""
    incoming = [
        IncomingFile(filename=upload.filename or "", content_type=upload.content_type, stream=upload.file)
        for upload in pdfs or []
    ]
    try:
        files = await upload_service.upload_documents(subject, document_type, year, incoming)
    finally:
        for upload in pdfs or []:
            await upload.close()
    return UploadResponse(files=files)
