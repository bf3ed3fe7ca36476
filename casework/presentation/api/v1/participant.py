"""Participant API endpoints."""

from dataclasses import asdict
from typing import Annotated

from fastapi import APIRouter, Depends, Path

from casework.application.dto import CreateParticipantRequest
from casework.application.services import ParticipantService
from casework.core.dependencies import get_participant_service, require_current_user
from casework.domain.entities import StaffUser
from casework.presentation.schemas import (
    CreateParticipantRequestSchema,
    ErrorResponseSchema,
    ParticipantDetailSchema,
    ParticipantSchema,
    PaymentStatusSchema,
)

participant_router = APIRouter(prefix="/participants")


@participant_router.get(
    "",
    response_model=list[ParticipantSchema],
    summary="List Participants",
    description="All participants ordered by last name, with shift and payment counts.",
)
async def list_participants(
    participant_service: Annotated[ParticipantService, Depends(get_participant_service)],
) -> list[ParticipantSchema]:
    participants = await participant_service.list_participants()
    return [ParticipantSchema(**asdict(p)) for p in participants]


@participant_router.get(
    "/{participant_id}",
    response_model=ParticipantDetailSchema,
    summary="Get Participant",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Participant not found"},
    },
)
async def get_participant(
    participant_id: Annotated[str, Path(max_length=36)],
    participant_service: Annotated[ParticipantService, Depends(get_participant_service)],
) -> ParticipantDetailSchema:
    detail = await participant_service.get_participant(participant_id)
    return ParticipantDetailSchema(
        participant=ParticipantSchema(**asdict(detail.participant)),
        payment_status=PaymentStatusSchema(**detail.payment_status),
    )


@participant_router.post(
    "",
    response_model=ParticipantSchema,
    status_code=201,
    summary="Enroll Participant",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid request"},
        401: {"model": ErrorResponseSchema, "description": "Missing caller identity"},
    },
)
async def create_participant(
    request: CreateParticipantRequestSchema,
    user: Annotated[StaffUser, Depends(require_current_user)],
    participant_service: Annotated[ParticipantService, Depends(get_participant_service)],
) -> ParticipantSchema:
    response = await participant_service.create_participant(
        CreateParticipantRequest(
            first_name=request.first_name,
            last_name=request.last_name,
            created_by_id=user.id,
            preferred_name=request.preferred_name,
            phone=request.phone,
            email=request.email,
            notes=request.notes,
        )
    )
    return ParticipantSchema(**asdict(response))
