"""ASGI entry point: ``uvicorn casework.main:app``."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from casework import __version__
from casework.core.config import settings
from casework.core.dependencies import get_program_timezone
from casework.core.logging import setup_logging
from casework.core.metrics import get_metrics, get_metrics_content_type
from casework.infrastructure.database import db_manager
from casework.presentation.api import api_router
from casework.presentation.middleware import (
    LoggingMiddleware,
    RequestContextMiddleware,
    error_handler_middleware,
)

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging()
    db_manager.init()

    logger.info(
        "application_started",
        version=__version__,
        program_timezone=str(get_program_timezone()),
        metrics_enabled=settings.metrics_enabled,
    )

    try:
        yield
    finally:
        await db_manager.close()
        logger.info("application_stopped")


def create_app() -> FastAPI:
    """Build the API with middleware, exception handlers and routes."""
    application = FastAPI(
        title=settings.app_name,
        description=(
            "Case management for the Cash for Trash work program: enrollment, "
            "shifts, capped weekly gift-card payments, homework and outcomes."
        ),
        version=__version__,
        lifespan=lifespan,
    )

    # Last added runs first: request context wraps the access log
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.add_middleware(LoggingMiddleware)
    application.add_middleware(RequestContextMiddleware)

    error_handler_middleware(application)
    application.include_router(api_router)

    @application.get("/metrics", include_in_schema=False)
    async def metrics() -> Response:
        return Response(content=get_metrics(), media_type=get_metrics_content_type())

    @application.get("/", include_in_schema=False)
    async def root():
        return RedirectResponse(url="/docs")

    return application


app = create_app()
