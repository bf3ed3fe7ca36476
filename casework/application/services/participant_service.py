"""Participant service - enrollment and lookup use cases."""

from typing import List

import structlog

from casework.domain.entities import Participant
from casework.domain.exceptions import (
    InvalidRequestException,
    ParticipantNotFoundException,
)
from casework.domain.interfaces import ParticipantRepository
from casework.application.dto import (
    CreateParticipantRequest,
    ParticipantDetailResponse,
    ParticipantResponse,
)
from .payment_service import PaymentService

logger = structlog.get_logger(__name__)


class ParticipantService:
    """
    Application service for participant use cases.
    """

    def __init__(
        self,
        participant_repository: ParticipantRepository,
        payment_service: PaymentService,
    ):
        self._participant_repo = participant_repository
        self._payment_service = payment_service

    async def create_participant(self, request: CreateParticipantRequest) -> ParticipantResponse:
        """
        Enroll a new participant.

        Raises:
            InvalidRequestException: If first or last name is missing
        """
        errors = request.validate()
        if errors:
            raise InvalidRequestException("; ".join(errors))

        participant = Participant(
            first_name=request.first_name.strip(),
            last_name=request.last_name.strip(),
            preferred_name=request.preferred_name or None,
            phone=request.phone or None,
            email=request.email or None,
            notes=request.notes or None,
            created_by_id=request.created_by_id,
        )
        await self._participant_repo.save(participant)

        logger.info(
            "participant_enrolled",
            participant_id=participant.id,
            created_by_id=request.created_by_id,
        )

        return ParticipantResponse.from_entity(participant)

    async def list_participants(self) -> List[ParticipantResponse]:
        participants = await self._participant_repo.list_all()
        return [ParticipantResponse.from_entity(p) for p in participants]

    async def get_participant(self, participant_id: str) -> ParticipantDetailResponse:
        """
        Retrieve a participant with their current payment status.

        Raises:
            ParticipantNotFoundException: If participant not found
        """
        participant = await self._participant_repo.get_by_id(participant_id)

        if participant is None:
            logger.warning("participant_not_found", participant_id=participant_id)
            raise ParticipantNotFoundException(participant_id)

        status = await self._payment_service.get_payment_status(participant_id)

        return ParticipantDetailResponse(
            participant=ParticipantResponse.from_entity(participant),
            payment_status=status.to_dict(),
        )
