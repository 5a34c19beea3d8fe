from fastapi import APIRouter

from .catalog import router as catalog_router
from .health import router as health_router
from .upload import router as upload_router

router = APIRouter()
router.include_router(upload_router)
router.include_router(catalog_router)
router.include_router(health_router)
