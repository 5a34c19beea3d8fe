from typing import Optional

from fastapi import FastAPI

from ..infrastructure.app_factory import create_application
from ..infrastructure.config.settings import Settings, get_settings
from ..infrastructure.storage import StorageRoot
from ..interfaces.api import router as api_router
from ..interfaces.ui.router import router as ui_router
from ..modules.common.utils.error_handler import register_exception_handlers
from .static import DocumentFiles


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the course library application.

    The storage root is resolved from ``settings.FILES_ROOT`` once, created if
    absent, and shared by the API services and the ``/files`` static mount.
    """
    settings = settings or get_settings()
    storage = StorageRoot(settings.FILES_ROOT_PATH)

    app = create_application(
        router=api_router,
        settings=settings,
        storage=storage,
        title="Course Library API",
        description="""
    # Course Library API

    PDF hosting for course material.

    * **Upload**: admins store PDFs under a subject / type / year catalog path
    * **Browse**: students list the PDFs of a catalog path
    * **Download**: stored files are served under `/files`, opened inline

    Storage is a plain directory tree; every listing re-reads the disk.
    """,
        version=settings.VERSION,
    )

    register_exception_handlers(app)

    app.include_router(ui_router)
    app.mount("/files", DocumentFiles(directory=storage.path), name="files")

    return app


app = create_app()
