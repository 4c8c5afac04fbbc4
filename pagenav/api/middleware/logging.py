"""Request logging middleware."""

import time
import uuid
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from pagenav.core.logging import get_logger, log_event

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class LoggingMiddleware(BaseHTTPMiddleware):
    """Logs each request with a request id and its processing time."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        started = time.perf_counter()

        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id

        request_info = {
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "query_params": dict(request.query_params),
            "client_host": request.client.host if request.client else None,
        }

        log_event(logger, "info", "request_started", **request_info)

        try:
            response = await call_next(request)
        except Exception as e:
            log_event(
                logger,
                "error",
                "request_failed",
                error=str(e),
                error_type=type(e).__name__,
                duration_seconds=time.perf_counter() - started,
                **request_info,
            )
            raise

        duration = time.perf_counter() - started
        log_event(
            logger,
            "info",
            "request_completed",
            status_code=response.status_code,
            duration_seconds=duration,
            **request_info,
        )

        response.headers["X-Process-Time"] = f"{duration:.6f}"
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
