"""Access logging and HTTP metrics."""

import time
from typing import Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from casework.core.config import settings
from casework.core.metrics import record_http_request

logger = structlog.get_logger(__name__)

# Probe and scrape traffic is logged at debug only
QUIET_PATHS = frozenset({"/health", "/health/ready", "/metrics"})


def _route_template(request: Request) -> str:
    route = request.scope.get("route")
    return getattr(route, "path", None) or request.url.path


class LoggingMiddleware(BaseHTTPMiddleware):
    """One access log line per request, plus request count and latency metrics."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        path = request.url.path
        log = logger.bind(method=request.method, path=path)
        quiet = path in QUIET_PATHS
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as e:
            log.error(
                "request_failed",
                error_type=type(e).__name__,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            raise

        elapsed = time.perf_counter() - started
        fields = {"status_code": response.status_code, "duration_ms": round(elapsed * 1000, 2)}

        if response.status_code >= 500:
            log.error("request_completed", **fields)
        elif quiet:
            log.debug("request_completed", **fields)
        else:
            log.info("request_completed", **fields)

        if settings.metrics_enabled and path != "/metrics":
            record_http_request(request.method, _route_template(request), response.status_code, elapsed)

        return response
