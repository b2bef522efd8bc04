from __future__ import annotations

import logging
import time

from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)


class RequestTimingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        response.headers["X-Process-Time-Ms"] = f"{elapsed_ms:.1f}"
        logger.debug("%s %s -> %d in %.1fms", request.method, request.url.path, response.status_code, elapsed_ms)
        return response


class RequestSizeLimitMiddleware(BaseHTTPMiddleware):
    """Rejects bodies larger than ``max_bytes`` based on Content-Length."""

    def __init__(self, app, *, max_bytes: int) -> None:
        super().__init__(app)
        self._max_bytes = max(1, max_bytes)

    async def dispatch(self, request: Request, call_next) -> Response:
        raw_length = request.headers.get("content-length")
        if not raw_length:
            return await call_next(request)
        try:
            length = int(raw_length)
        except ValueError:
            length = 0
        if length > self._max_bytes:
            logger.warning("Rejected %s %s: body of %d bytes exceeds %d", request.method, request.url.path, length, self._max_bytes)
            return JSONResponse(
                status_code=413,
                content={
                    "message": f"Request body too large ({length} bytes).",
                    "details": {"max_bytes": self._max_bytes},
                },
            )
        return await call_next(request)
