"""Liveness and readiness probes."""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from casework import __version__
from casework.infrastructure.database import get_db_session, ping

logger = structlog.get_logger(__name__)

health_router = APIRouter()


class HealthResponse(BaseModel):
    status: str
    version: str


class ReadinessResponse(HealthResponse):
    database: str


@health_router.get(
    "/health",
    response_model=HealthResponse,
    summary="Liveness",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="healthy", version=__version__)


@health_router.get(
    "/health/ready",
    response_model=ReadinessResponse,
    summary="Readiness",
    description="Healthy only when the database answers a trivial query.",
    responses={503: {"model": ReadinessResponse, "description": "Database unreachable"}},
)
async def readiness_check(
    session: Annotated[AsyncSession, Depends(get_db_session)],
):
    try:
        await ping(session)
    except (SQLAlchemyError, OSError) as e:
        logger.warning("readiness_check_failed", error=str(e), error_type=type(e).__name__)
        body = ReadinessResponse(status="unhealthy", version=__version__, database="unreachable")
        return JSONResponse(status_code=503, content=body.model_dump())

    return ReadinessResponse(status="healthy", version=__version__, database="ok")
