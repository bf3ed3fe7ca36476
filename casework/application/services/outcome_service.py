"""Outcome service - records housing and employment progress."""

from typing import List, Optional

import structlog

from casework.domain.entities import DestinationOutcome, HousingStatus
from casework.domain.exceptions import (
    InvalidRequestException,
    ParticipantNotFoundException,
)
from casework.domain.interfaces import OutcomeRepository, ParticipantRepository
from casework.application.dto import OutcomeResponse, RecordOutcomeRequest

logger = structlog.get_logger(__name__)


class OutcomeService:
    """Application service for destination outcomes."""

    def __init__(
        self,
        outcome_repository: OutcomeRepository,
        participant_repository: ParticipantRepository,
    ):
        self._outcome_repo = outcome_repository
        self._participant_repo = participant_repository

    async def list_outcomes(self, participant_id: Optional[str] = None) -> List[OutcomeResponse]:
        outcomes = await self._outcome_repo.list(participant_id)
        return [OutcomeResponse.from_entity(o) for o in outcomes]

    async def record_outcome(self, request: RecordOutcomeRequest) -> OutcomeResponse:
        """
        Record a new outcome snapshot.

        Details are only kept for the OTHER housing status.

        Raises:
            InvalidRequestException: If OTHER housing lacks details
            ParticipantNotFoundException: If the participant doesn't exist
        """
        errors = request.validate()
        if errors:
            raise InvalidRequestException("; ".join(errors))

        if await self._participant_repo.get_by_id(request.participant_id) is None:
            raise ParticipantNotFoundException(request.participant_id)

        outcome = await self._outcome_repo.save(
            DestinationOutcome(
                participant_id=request.participant_id,
                housing_status=request.housing_status,
                other_housing_details=(
                    request.other_housing_details.strip()
                    if request.housing_status == HousingStatus.OTHER
                    else None
                ),
                employment_status=request.employment_status,
                benefits=list(dict.fromkeys(request.benefits)),
                documents_obtained=list(dict.fromkeys(request.documents_obtained)),
                notes=request.notes or None,
                recorded_by_id=request.recorded_by_id,
            )
        )

        logger.info(
            "outcome_recorded",
            outcome_id=outcome.id,
            participant_id=request.participant_id,
            housing_status=outcome.housing_status.value,
            employment_status=outcome.employment_status.value,
        )

        return OutcomeResponse.from_entity(outcome)
