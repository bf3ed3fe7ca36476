"""Destination outcome API endpoints."""

from dataclasses import asdict
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query

from casework.application.dto import RecordOutcomeRequest
from casework.application.services import OutcomeService
from casework.core.dependencies import get_outcome_service, require_current_user
from casework.domain.entities import StaffUser
from casework.presentation.schemas import (
    ErrorResponseSchema,
    OutcomeSchema,
    RecordOutcomeRequestSchema,
)

outcome_router = APIRouter(prefix="/outcomes")


@outcome_router.get(
    "",
    response_model=list[OutcomeSchema],
    summary="List Outcomes",
    description="Recorded outcomes, newest first.",
)
async def list_outcomes(
    outcome_service: Annotated[OutcomeService, Depends(get_outcome_service)],
    participant_id: Annotated[Optional[str], Query(max_length=36)] = None,
) -> list[OutcomeSchema]:
    outcomes = await outcome_service.list_outcomes(participant_id)
    return [OutcomeSchema(**asdict(o)) for o in outcomes]


@outcome_router.post(
    "",
    response_model=OutcomeSchema,
    status_code=201,
    summary="Record Outcome",
    description="""
    Record a participant's housing and employment situation.

    The OTHER housing status requires `other_housing_details`.
    """,
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid request"},
        401: {"model": ErrorResponseSchema, "description": "Missing caller identity"},
        404: {"model": ErrorResponseSchema, "description": "Participant not found"},
    },
)
async def record_outcome(
    request: RecordOutcomeRequestSchema,
    user: Annotated[StaffUser, Depends(require_current_user)],
    outcome_service: Annotated[OutcomeService, Depends(get_outcome_service)],
) -> OutcomeSchema:
    response = await outcome_service.record_outcome(
        RecordOutcomeRequest(
            participant_id=request.participant_id.strip(),
            recorded_by_id=user.id,
            housing_status=request.housing_status,
            employment_status=request.employment_status,
            other_housing_details=request.other_housing_details,
            benefits=list(request.benefits),
            documents_obtained=list(request.documents_obtained),
            notes=request.notes,
        )
    )
    return OutcomeSchema(**asdict(response))
