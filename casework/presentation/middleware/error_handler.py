"""Error handling middleware and exception handlers."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import structlog

from casework.core.metrics import record_payment_rejected
from casework.domain.exceptions import (
    DomainException,
    HomeworkNotFoundException,
    ParticipantNotFoundException,
    PaymentNotAllowedException,
    ShiftNotFoundException,
    UnauthorizedException,
)
from .request_context import get_request_id

logger = structlog.get_logger(__name__)


def _error_body(exc: DomainException) -> dict:
    return {
        "error": exc.code,
        "message": exc.message,
        "request_id": get_request_id(),
    }


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Maps domain exceptions to appropriate HTTP responses.
    """

    @app.exception_handler(ParticipantNotFoundException)
    @app.exception_handler(ShiftNotFoundException)
    @app.exception_handler(HomeworkNotFoundException)
    async def not_found_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle not found errors."""
        return JSONResponse(status_code=404, content=_error_body(exc))

    @app.exception_handler(UnauthorizedException)
    async def unauthorized_handler(
        request: Request,
        exc: UnauthorizedException,
    ) -> JSONResponse:
        """Handle missing caller identity."""
        return JSONResponse(status_code=401, content=_error_body(exc))

    @app.exception_handler(PaymentNotAllowedException)
    async def payment_not_allowed_handler(
        request: Request,
        exc: PaymentNotAllowedException,
    ) -> JSONResponse:
        """Handle eligibility rejections as a client error with the standing attached."""
        eligibility = exc.eligibility
        record_payment_rejected(eligibility.reached_lifetime_cap)
        return JSONResponse(
            status_code=400,
            content={
                **_error_body(exc),
                "validation": {
                    "lifetime_total": eligibility.lifetime_total,
                    "payments_remaining": eligibility.payments_remaining,
                    "paid_this_week": eligibility.paid_this_week,
                    "reached_lifetime_cap": eligibility.reached_lifetime_cap,
                },
            },
        )

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle generic domain exceptions."""
        logger.warning(
            "domain_exception",
            request_id=get_request_id(),
            code=exc.code,
            message=exc.message,
        )
        return JSONResponse(status_code=400, content=_error_body(exc))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "unhandled_exception",
            request_id=get_request_id(),
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": "INTERNAL_ERROR",
                "message": "An unexpected error occurred.",
                "request_id": get_request_id(),
            },
        )
