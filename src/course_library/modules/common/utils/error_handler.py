"""Global exception handlers rendering every failure as the JSON error envelope."""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ....infrastructure.logging import get_logger
from ..constants import EXCEPTION_MAPPING, INTERNAL_ERROR_MESSAGE, NOT_FOUND_MESSAGE
from ..exceptions import DomainError
from ..schemas import ErrorResponse

logger = get_logger(__name__)


def map_exception(error: DomainError) -> int:
    """Map a domain exception to the HTTP status code it is reported with."""
    for exception_class, status_code in EXCEPTION_MAPPING.items():
        if isinstance(error, exception_class):
            return status_code

    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(status_code: int, message: str, path: str | None = None) -> JSONResponse:
    body = ErrorResponse(error=message, path=path)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def _describe_validation_error(exc: RequestValidationError) -> str:
    fields = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        fields.append(".".join(location) or error.get("msg", "invalid value"))
    return f"Invalid or missing fields: {', '.join(fields)}" if fields else "Invalid request"


def register_exception_handlers(app: FastAPI) -> None:
    """Register global exception handlers for domain and transport errors."""

    @app.exception_handler(DomainError)
    async def domain_exception_handler(request: Request, exc: DomainError) -> JSONResponse:
        """Convert domain exceptions to the error envelope."""
        status_code = map_exception(exc)
        if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(f"{request.method} {request.url.path} failed: {exc}", exc_info=exc)
        else:
            logger.warning(f"{request.method} {request.url.path} rejected: {exc}")
        return error_response(status_code, str(exc))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            return error_response(exc.status_code, NOT_FOUND_MESSAGE, path=request.url.path)
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        message = _describe_validation_error(exc)
        logger.warning(f"{request.method} {request.url.path} rejected: {message}")
        return error_response(status.HTTP_400_BAD_REQUEST, message)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)
