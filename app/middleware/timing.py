"""
Request timing and access logging middleware
"""

import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.logging import log


SLOW_REQUEST_SECONDS = 1.0

# Probes and assets would drown out the access log
QUIET_PREFIXES = ("/static/", "/api/v1/health", "/metrics")


class TimingMiddleware(BaseHTTPMiddleware):
    """Report processing time in ``X-Process-Time`` and write one access log line per request"""

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - started

        response.headers["X-Process-Time"] = f"{elapsed:.4f}"

        path = request.url.path
        if not path.startswith(QUIET_PREFIXES):
            log_level = "WARNING" if elapsed > SLOW_REQUEST_SECONDS else "INFO"
            log.log(
                log_level,
                "Request handled",
                method=request.method,
                path=path,
                status=response.status_code,
                duration_ms=round(elapsed * 1000, 1),
            )

        return response
