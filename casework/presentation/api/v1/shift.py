"""Work shift API endpoints."""

from dataclasses import asdict
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Path, Query

from casework.application.dto import ClockInRequest, UpdateShiftRequest
from casework.application.services import ShiftService
from casework.core.dependencies import get_shift_service, require_current_user
from casework.domain.entities import StaffUser
from casework.presentation.schemas import (
    ClockInRequestSchema,
    DeletedResponseSchema,
    ErrorResponseSchema,
    ShiftSchema,
    UpdateShiftRequestSchema,
)

shift_router = APIRouter(
    prefix="/shifts",
    responses={
        401: {"model": ErrorResponseSchema, "description": "Missing caller identity"},
    },
)


@shift_router.get(
    "",
    response_model=list[ShiftSchema],
    summary="List Shifts",
    description="Shifts newest clock-in first; `active=true` returns open shifts only.",
)
async def list_shifts(
    shift_service: Annotated[ShiftService, Depends(get_shift_service)],
    active: Annotated[bool, Query(description="Only shifts without a clock-out")] = False,
    participant_id: Annotated[Optional[str], Query(max_length=36)] = None,
) -> list[ShiftSchema]:
    shifts = await shift_service.list_shifts(participant_id=participant_id, active_only=active)
    return [ShiftSchema(**asdict(s)) for s in shifts]


@shift_router.post(
    "",
    response_model=ShiftSchema,
    status_code=201,
    summary="Clock In",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Already clocked in"},
        404: {"model": ErrorResponseSchema, "description": "Participant not found"},
    },
)
async def clock_in(
    request: ClockInRequestSchema,
    user: Annotated[StaffUser, Depends(require_current_user)],
    shift_service: Annotated[ShiftService, Depends(get_shift_service)],
) -> ShiftSchema:
    response = await shift_service.clock_in(
        ClockInRequest(
            participant_id=request.participant_id.strip(),
            created_by_id=user.id,
            location=request.location,
            notes=request.notes,
        )
    )
    return ShiftSchema(**asdict(response))


@shift_router.patch(
    "/{shift_id}",
    response_model=ShiftSchema,
    summary="Update Shift",
    description="Record bags collected, clock out, or edit notes/location.",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Shift not found"},
    },
)
async def update_shift(
    shift_id: Annotated[str, Path(max_length=36)],
    request: UpdateShiftRequestSchema,
    user: Annotated[StaffUser, Depends(require_current_user)],
    shift_service: Annotated[ShiftService, Depends(get_shift_service)],
) -> ShiftSchema:
    response = await shift_service.update_shift(
        shift_id,
        UpdateShiftRequest(
            bags_collected=request.bags_collected,
            clock_out=request.clock_out,
            notes=request.notes,
            location=request.location,
            provided=frozenset(request.model_fields_set),
        ),
    )
    return ShiftSchema(**asdict(response))


@shift_router.delete(
    "/{shift_id}",
    response_model=DeletedResponseSchema,
    summary="Delete Shift",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Shift not found"},
    },
)
async def delete_shift(
    shift_id: Annotated[str, Path(max_length=36)],
    user: Annotated[StaffUser, Depends(require_current_user)],
    shift_service: Annotated[ShiftService, Depends(get_shift_service)],
) -> DeletedResponseSchema:
    await shift_service.delete_shift(shift_id)
    return DeletedResponseSchema(success=True)
