"""Per-request tracing context: request id and caller id."""

import uuid
from contextvars import ContextVar
from typing import Optional

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

REQUEST_ID_HEADER = "X-Request-ID"
USER_ID_HEADER = "X-User-ID"

request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


def get_request_id() -> Optional[str]:
    return request_id_var.get()


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Tag every log line of a request with its request id and, for
    authenticated calls, the staff member's id.

    An incoming ``X-Request-ID`` is reused so ids line up with the
    gateway's logs; otherwise a fresh UUID is minted. The id is echoed
    back on the response.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        context = {"request_id": request_id}
        user_id = (request.headers.get(USER_ID_HEADER) or "").strip()
        if user_id:
            context["user_id"] = user_id

        token = request_id_var.set(request_id)
        try:
            with structlog.contextvars.bound_contextvars(**context):
                response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
