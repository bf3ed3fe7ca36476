"""Homework service - assignment tracking use cases."""

from datetime import datetime, timezone
from typing import Callable, List, Optional

import structlog

from casework.domain.entities import HomeworkAssignment, HomeworkFilter
from casework.domain.exceptions import (
    HomeworkNotFoundException,
    InvalidRequestException,
    ParticipantNotFoundException,
)
from casework.domain.interfaces import HomeworkRepository, ParticipantRepository
from casework.application.dto import (
    CreateHomeworkRequest,
    HomeworkResponse,
    UpdateHomeworkRequest,
)

logger = structlog.get_logger(__name__)


def _to_utc(value: Optional[datetime]) -> Optional[datetime]:
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class HomeworkService:
    """Application service for homework assignments."""

    def __init__(
        self,
        homework_repository: HomeworkRepository,
        participant_repository: ParticipantRepository,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ):
        self._homework_repo = homework_repository
        self._participant_repo = participant_repository
        self._clock = clock

    async def list_homework(
        self,
        participant_id: Optional[str] = None,
        status_filter: Optional[HomeworkFilter] = None,
    ) -> List[HomeworkResponse]:
        now = self._clock()
        items = await self._homework_repo.list(
            now=now,
            participant_id=participant_id,
            status_filter=status_filter,
        )
        return [HomeworkResponse.from_entity(h, now) for h in items]

    async def assign_homework(self, request: CreateHomeworkRequest) -> HomeworkResponse:
        """
        Raises:
            InvalidRequestException: If participant or title is missing
            ParticipantNotFoundException: If the participant doesn't exist
        """
        errors = request.validate()
        if errors:
            raise InvalidRequestException("; ".join(errors))

        if await self._participant_repo.get_by_id(request.participant_id) is None:
            raise ParticipantNotFoundException(request.participant_id)

        homework = await self._homework_repo.save(
            HomeworkAssignment(
                participant_id=request.participant_id,
                title=request.title.strip(),
                description=request.description or None,
                due_date=_to_utc(request.due_date),
                notes=request.notes or None,
                assigned_by_id=request.assigned_by_id,
                assigned_date=self._clock(),
            )
        )

        logger.info(
            "homework_assigned",
            homework_id=homework.id,
            participant_id=request.participant_id,
        )

        return HomeworkResponse.from_entity(homework, self._clock())

    async def update_homework(
        self,
        homework_id: str,
        request: UpdateHomeworkRequest,
    ) -> HomeworkResponse:
        """
        Raises:
            InvalidRequestException: If the update is invalid
            HomeworkNotFoundException: If homework not found
        """
        errors = request.validate()
        if errors:
            raise InvalidRequestException("; ".join(errors))

        homework = await self._homework_repo.get_by_id(homework_id)
        if homework is None:
            raise HomeworkNotFoundException(homework_id)

        now = self._clock()

        if request.is_completed is not None:
            homework.set_completed(request.is_completed, now)

        if "title" in request.provided:
            homework.title = request.title.strip()

        if "description" in request.provided:
            homework.description = request.description or None

        if "due_date" in request.provided:
            homework.due_date = _to_utc(request.due_date)

        if "notes" in request.provided:
            homework.notes = request.notes or None

        updated = await self._homework_repo.update(homework)

        logger.info(
            "homework_updated",
            homework_id=homework_id,
            is_completed=updated.is_completed,
        )

        return HomeworkResponse.from_entity(updated, now)

    async def delete_homework(self, homework_id: str) -> None:
        """
        Raises:
            HomeworkNotFoundException: If homework not found
        """
        deleted = await self._homework_repo.delete(homework_id)
        if not deleted:
            raise HomeworkNotFoundException(homework_id)

        logger.info("homework_deleted", homework_id=homework_id)
