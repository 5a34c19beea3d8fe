"""HTTP middleware tagging each request with a correlation ID and logging it."""

import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from .logging import generate_correlation_id, get_logger, reset_correlation_id, set_correlation_id

logger = get_logger(__name__)

CORRELATION_HEADER = "X-Request-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Assign a correlation ID per request and log method, path, status and duration.

    An incoming ``X-Request-ID`` header is reused as the correlation ID; the ID
    is echoed back on the response.
    """

    def __init__(self, app, log_requests: bool = True):
        super().__init__(app)
        self.log_requests = log_requests

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        correlation_id = request.headers.get(CORRELATION_HEADER) or generate_correlation_id()
        request.state.correlation_id = correlation_id
        token = set_correlation_id(correlation_id)
        started = time.perf_counter()
        try:
            response = await call_next(request)
            response.headers[CORRELATION_HEADER] = correlation_id
            if self.log_requests:
                duration_ms = (time.perf_counter() - started) * 1000
                logger.info(
                    f"{request.method} {request.url.path} -> {response.status_code}",
                    extra={"status_code": response.status_code, "duration_ms": round(duration_ms, 2)},
                )
            return response
        finally:
            reset_correlation_id(token)
