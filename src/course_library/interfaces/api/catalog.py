"""Catalog listing and storage structure endpoints."""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query

from ...modules.common.schemas import ErrorResponse
from ...modules.document.schemas import FileListResponse
from ...modules.document.services import CatalogService
from ...modules.structure.schemas import StructureResponse
from ...modules.structure.services import StructureService
from .dependencies import get_catalog_service, get_structure_service

router = APIRouter(prefix="/api", tags=["Catalog"])


@router.get(
    "/files",
    response_model=FileListResponse,
    summary="List Documents",
    description="""
    Lists the PDFs stored for one (subject, type, year), ordered by name.

    A catalog path nothing was uploaded to yet returns an empty list.
    """,
    responses={
        200: {"description": "Stored files, possibly none"},
        400: {"model": ErrorResponse, "description": "subject, type or year missing"},
        500: {"model": ErrorResponse, "description": "Directory could not be read"},
    },
)
async def list_documents(
    subject: Annotated[Optional[str], Query(description="Course identifier")] = None,
    document_type: Annotated[Optional[str], Query(alias="type", description="Document type")] = None,
    year: Annotated[Optional[str], Query(description="Four-digit year")] = None,
    catalog_service: CatalogService = Depends(get_catalog_service),
) -> FileListResponse:
    """List stored PDFs for a catalog path."""
    files = await catalog_service.list_documents(subject, document_type, year)
    return FileListResponse(files=files)


@router.get(
    "/structure",
    response_model=StructureResponse,
    response_model_exclude_none=True,
    summary="Storage Structure",
    description="Returns every directory and PDF under the storage root as a tree. Intended for debugging.",
    responses={
        500: {"model": ErrorResponse, "description": "Storage tree could not be read"},
    },
)
async def get_structure(
    structure_service: StructureService = Depends(get_structure_service),
) -> StructureResponse:
    structure = await structure_service.get_structure()
    return StructureResponse(structure=structure)
