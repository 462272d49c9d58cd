# daykind/core/request_logging.py
"""
Request logging middleware for tracking all HTTP requests.
"""

import time
import uuid
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from daykind.core.logging_config import get_logger

logger = get_logger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware that logs all HTTP requests with timing and status codes.

    Adds a unique request ID to each request for tracing.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id

        start_time = time.perf_counter()
        status_code = 500
        error = None

        try:
            response = await call_next(request)
            status_code = response.status_code
        except Exception as e:
            error = str(e)
            raise
        finally:
            duration_ms = (time.perf_counter() - start_time) * 1000
            _log_request(request, request_id, status_code, duration_ms, error)

        response.headers["X-Request-ID"] = request_id
        return response


def _log_request(
    request: Request,
    request_id: str,
    status_code: int,
    duration_ms: float,
    error: str | None,
) -> None:
    """Log one finished request at a level matching its outcome."""
    extra = {
        "extra_fields": {
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "query": str(request.url.query),
            "status_code": status_code,
            "duration_ms": duration_ms,
        }
    }
    message = f"{request.method} {request.url.path} - {status_code} ({duration_ms:.2f}ms)"

    if error:
        logger.error(f"{message} - ERROR: {error}", extra=extra, exc_info=True)
    elif status_code >= 500:
        logger.error(message, extra=extra)
    elif status_code >= 400:
        logger.warning(message, extra=extra)
    elif request.url.path == "/health":
        # Don't log health checks at INFO level (reduces noise)
        logger.debug(message, extra=extra)
    else:
        logger.info(message, extra=extra)
