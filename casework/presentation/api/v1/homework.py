"""Homework assignment API endpoints."""

from dataclasses import asdict
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Path, Query

from casework.application.dto import CreateHomeworkRequest, UpdateHomeworkRequest
from casework.application.services import HomeworkService
from casework.core.dependencies import get_homework_service, require_current_user
from casework.domain.entities import HomeworkFilter, StaffUser
from casework.presentation.schemas import (
    CreateHomeworkRequestSchema,
    DeletedResponseSchema,
    ErrorResponseSchema,
    HomeworkSchema,
    UpdateHomeworkRequestSchema,
)

homework_router = APIRouter(
    prefix="/homework",
    responses={
        401: {"model": ErrorResponseSchema, "description": "Missing caller identity"},
    },
)


@homework_router.get(
    "",
    response_model=list[HomeworkSchema],
    summary="List Homework",
    description="Incomplete assignments first, then by due date.",
)
async def list_homework(
    homework_service: Annotated[HomeworkService, Depends(get_homework_service)],
    participant_id: Annotated[Optional[str], Query(max_length=36)] = None,
    status_filter: Annotated[
        Optional[HomeworkFilter],
        Query(alias="filter", description="overdue, pending or completed"),
    ] = None,
) -> list[HomeworkSchema]:
    items = await homework_service.list_homework(
        participant_id=participant_id,
        status_filter=status_filter,
    )
    return [HomeworkSchema(**asdict(h)) for h in items]


@homework_router.post(
    "",
    response_model=HomeworkSchema,
    status_code=201,
    summary="Assign Homework",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid request"},
        404: {"model": ErrorResponseSchema, "description": "Participant not found"},
    },
)
async def assign_homework(
    request: CreateHomeworkRequestSchema,
    user: Annotated[StaffUser, Depends(require_current_user)],
    homework_service: Annotated[HomeworkService, Depends(get_homework_service)],
) -> HomeworkSchema:
    response = await homework_service.assign_homework(
        CreateHomeworkRequest(
            participant_id=request.participant_id.strip(),
            title=request.title,
            assigned_by_id=user.id,
            description=request.description,
            due_date=request.due_date,
            notes=request.notes,
        )
    )
    return HomeworkSchema(**asdict(response))


@homework_router.patch(
    "/{homework_id}",
    response_model=HomeworkSchema,
    summary="Update Homework",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Homework not found"},
    },
)
async def update_homework(
    homework_id: Annotated[str, Path(max_length=36)],
    request: UpdateHomeworkRequestSchema,
    user: Annotated[StaffUser, Depends(require_current_user)],
    homework_service: Annotated[HomeworkService, Depends(get_homework_service)],
) -> HomeworkSchema:
    response = await homework_service.update_homework(
        homework_id,
        UpdateHomeworkRequest(
            is_completed=request.is_completed,
            title=request.title,
            description=request.description,
            due_date=request.due_date,
            notes=request.notes,
            provided=frozenset(request.model_fields_set),
        ),
    )
    return HomeworkSchema(**asdict(response))


@homework_router.delete(
    "/{homework_id}",
    response_model=DeletedResponseSchema,
    summary="Delete Homework",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Homework not found"},
    },
)
async def delete_homework(
    homework_id: Annotated[str, Path(max_length=36)],
    user: Annotated[StaffUser, Depends(require_current_user)],
    homework_service: Annotated[HomeworkService, Depends(get_homework_service)],
) -> DeletedResponseSchema:
    await homework_service.delete_homework(homework_id)
    return DeletedResponseSchema(success=True)
