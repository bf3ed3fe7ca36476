"""PostgreSQL repository implementation for homework assignments."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from casework.domain.entities import HomeworkAssignment, HomeworkFilter
from casework.domain.interfaces import HomeworkRepository
from casework.infrastructure.database.models import HomeworkAssignmentModel, ensure_utc


class PostgresHomeworkRepository(HomeworkRepository):
    """PostgreSQL-backed homework repository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, homework: HomeworkAssignment) -> HomeworkAssignment:
        model = HomeworkAssignmentModel(
            id=homework.id,
            participant_id=homework.participant_id,
            title=homework.title,
            description=homework.description,
            assigned_date=homework.assigned_date,
            due_date=homework.due_date,
            is_completed=homework.is_completed,
            completed_date=homework.completed_date,
            notes=homework.notes,
            assigned_by_id=homework.assigned_by_id,
        )

        self._session.add(model)
        await self._session.flush()

        return await self.get_by_id(homework.id)

    async def update(self, homework: HomeworkAssignment) -> HomeworkAssignment:
        model = await self._get_model(homework.id)

        if model is None:
            raise ValueError(f"Homework {homework.id} not found")

        model.title = homework.title
        model.description = homework.description
        model.due_date = homework.due_date
        model.notes = homework.notes
        model.is_completed = homework.is_completed
        model.completed_date = homework.completed_date

        await self._session.flush()

        return self._to_entity(model)

    async def delete(self, homework_id: str) -> bool:
        stmt = delete(HomeworkAssignmentModel).where(HomeworkAssignmentModel.id == homework_id)
        result = await self._session.execute(stmt)
        return result.rowcount > 0

    async def get_by_id(self, homework_id: str) -> Optional[HomeworkAssignment]:
        model = await self._get_model(homework_id)

        if model is None:
            return None

        return self._to_entity(model)

    async def list(
        self,
        now: datetime,
        participant_id: Optional[str] = None,
        status_filter: Optional[HomeworkFilter] = None,
    ) -> List[HomeworkAssignment]:
        stmt = select(HomeworkAssignmentModel).options(
            selectinload(HomeworkAssignmentModel.participant),
            selectinload(HomeworkAssignmentModel.assigned_by),
        )

        if participant_id:
            stmt = stmt.where(HomeworkAssignmentModel.participant_id == participant_id)

        if status_filter == HomeworkFilter.OVERDUE:
            stmt = stmt.where(
                HomeworkAssignmentModel.is_completed.is_(False),
                HomeworkAssignmentModel.due_date < now,
            )
        elif status_filter == HomeworkFilter.PENDING:
            stmt = stmt.where(HomeworkAssignmentModel.is_completed.is_(False))
        elif status_filter == HomeworkFilter.COMPLETED:
            stmt = stmt.where(HomeworkAssignmentModel.is_completed.is_(True))

        stmt = stmt.order_by(
            HomeworkAssignmentModel.is_completed.asc(),
            HomeworkAssignmentModel.due_date.asc().nulls_last(),
            HomeworkAssignmentModel.assigned_date.desc(),
        )

        result = await self._session.execute(stmt)
        models = result.scalars().all()

        return [self._to_entity(model) for model in models]

    async def _get_model(self, homework_id: str) -> Optional[HomeworkAssignmentModel]:
        stmt = (
            select(HomeworkAssignmentModel)
            .options(
                selectinload(HomeworkAssignmentModel.participant),
                selectinload(HomeworkAssignmentModel.assigned_by),
            )
            .where(HomeworkAssignmentModel.id == homework_id)
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_entity(self, model: HomeworkAssignmentModel) -> HomeworkAssignment:
        participant = model.participant
        return HomeworkAssignment(
            id=model.id,
            participant_id=model.participant_id,
            title=model.title,
            description=model.description,
            assigned_date=ensure_utc(model.assigned_date),
            due_date=ensure_utc(model.due_date),
            is_completed=model.is_completed,
            completed_date=ensure_utc(model.completed_date),
            notes=model.notes,
            assigned_by_id=model.assigned_by_id,
            participant_name=(
                f"{participant.first_name} {participant.last_name}" if participant else None
            ),
            assigned_by_name=model.assigned_by.name if model.assigned_by else None,
        )
