"""FastAPI dependencies for use in API endpoints."""

from typing import Annotated

from fastapi import Depends, Request

from ...infrastructure.config.settings import Settings
from ...infrastructure.storage import StorageRoot
from ...modules.document.services import CatalogService, UploadService
from ...modules.structure.services import StructureService


def get_app_settings(request: Request) -> Settings:
    """Dependency for the settings the application was built with."""
    return request.app.state.settings


def get_storage(request: Request) -> StorageRoot:
    """Dependency for the storage root resolved at startup."""
    return request.app.state.storage


AppSettings = Annotated[Settings, Depends(get_app_settings)]
Storage = Annotated[StorageRoot, Depends(get_storage)]


def get_upload_service(storage: Storage, settings: AppSettings) -> UploadService:
    """Dependency for providing an UploadService instance."""
    return UploadService(storage, max_upload_size=settings.MAX_UPLOAD_SIZE)


def get_catalog_service(storage: Storage) -> CatalogService:
    """Dependency for providing a CatalogService instance."""
    return CatalogService(storage)


def get_structure_service(storage: Storage) -> StructureService:
    """Dependency for providing a StructureService instance."""
    return StructureService(storage)
