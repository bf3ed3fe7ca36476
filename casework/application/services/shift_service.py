"""Shift service - clock-in, clock-out and shift maintenance."""

from datetime import datetime, timezone
from typing import Callable, List, Optional

import structlog

from casework.domain.entities import Shift
from casework.domain.exceptions import (
    AlreadyClockedInException,
    InvalidRequestException,
    ParticipantNotFoundException,
    ShiftNotFoundException,
)
from casework.domain.interfaces import ParticipantRepository, ShiftRepository
from casework.application.dto import ClockInRequest, ShiftResponse, UpdateShiftRequest

logger = structlog.get_logger(__name__)


class ShiftService:
    """
    Application service for work shift use cases.

    A participant may have at most one open shift at a time.
    """

    def __init__(
        self,
        shift_repository: ShiftRepository,
        participant_repository: ParticipantRepository,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ):
        self._shift_repo = shift_repository
        self._participant_repo = participant_repository
        self._clock = clock

    async def list_shifts(
        self,
        participant_id: Optional[str] = None,
        active_only: bool = False,
    ) -> List[ShiftResponse]:
        shifts = await self._shift_repo.list(participant_id=participant_id, active_only=active_only)
        return [ShiftResponse.from_entity(s) for s in shifts]

    async def clock_in(self, request: ClockInRequest) -> ShiftResponse:
        """
        Start a shift for a participant.

        Raises:
            InvalidRequestException: If participant_id is missing
            ParticipantNotFoundException: If the participant doesn't exist
            AlreadyClockedInException: If the participant has an open shift
        """
        errors = request.validate()
        if errors:
            raise InvalidRequestException("; ".join(errors))

        participant = await self._participant_repo.get_by_id(request.participant_id)
        if participant is None:
            raise ParticipantNotFoundException(request.participant_id)

        active = await self._shift_repo.get_active_for_participant(request.participant_id)
        if active is not None:
            logger.info(
                "clock_in_rejected",
                participant_id=request.participant_id,
                active_shift_id=active.id,
            )
            raise AlreadyClockedInException(request.participant_id)

        shift = await self._shift_repo.save(
            Shift(
                participant_id=request.participant_id,
                created_by_id=request.created_by_id,
                location=request.location or None,
                notes=request.notes or None,
                clock_in=self._clock(),
            )
        )

        logger.info("clocked_in", participant_id=request.participant_id, shift_id=shift.id)

        return ShiftResponse.from_entity(shift)

    async def update_shift(self, shift_id: str, request: UpdateShiftRequest) -> ShiftResponse:
        """
        Apply a partial update: bag count, clock-out, notes or location.

        Raises:
            InvalidRequestException: If the update is invalid
            ShiftNotFoundException: If shift not found
        """
        errors = request.validate()
        if errors:
            raise InvalidRequestException("; ".join(errors))

        shift = await self._shift_repo.get_by_id(shift_id)
        if shift is None:
            raise ShiftNotFoundException(shift_id)

        if request.bags_collected is not None:
            shift.bags_collected = request.bags_collected

        if request.clock_out:
            shift.close(self._clock())

        if "notes" in request.provided:
            shift.notes = request.notes

        if "location" in request.provided:
            shift.location = request.location

        updated = await self._shift_repo.update(shift)

        logger.info(
            "shift_updated",
            shift_id=shift_id,
            clocked_out=request.clock_out,
            bags_collected=updated.bags_collected,
        )

        return ShiftResponse.from_entity(updated)

    async def delete_shift(self, shift_id: str) -> None:
        """
        Raises:
            ShiftNotFoundException: If shift not found
        """
        deleted = await self._shift_repo.delete(shift_id)
        if not deleted:
            raise ShiftNotFoundException(shift_id)

        logger.info("shift_deleted", shift_id=shift_id)
