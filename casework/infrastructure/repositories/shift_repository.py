"""PostgreSQL repository implementation for work shifts."""

from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from casework.domain.entities import Shift
from casework.domain.interfaces import ShiftRepository
from casework.infrastructure.database.models import ShiftModel, ensure_utc


class PostgresShiftRepository(ShiftRepository):
    """PostgreSQL-backed shift repository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, shift: Shift) -> Shift:
        model = ShiftModel(
            id=shift.id,
            participant_id=shift.participant_id,
            clock_in=shift.clock_in,
            clock_out=shift.clock_out,
            bags_collected=shift.bags_collected,
            location=shift.location,
            notes=shift.notes,
            created_by_id=shift.created_by_id,
        )

        self._session.add(model)
        await self._session.flush()

        return await self.get_by_id(shift.id)

    async def update(self, shift: Shift) -> Shift:
        model = await self._get_model(shift.id)

        if model is None:
            raise ValueError(f"Shift {shift.id} not found")

        model.clock_out = shift.clock_out
        model.bags_collected = shift.bags_collected
        model.location = shift.location
        model.notes = shift.notes

        await self._session.flush()

        return self._to_entity(model)

    async def delete(self, shift_id: str) -> bool:
        stmt = delete(ShiftModel).where(ShiftModel.id == shift_id)
        result = await self._session.execute(stmt)
        return result.rowcount > 0

    async def get_by_id(self, shift_id: str) -> Optional[Shift]:
        model = await self._get_model(shift_id)

        if model is None:
            return None

        return self._to_entity(model)

    async def get_active_for_participant(self, participant_id: str) -> Optional[Shift]:
        stmt = (
            select(ShiftModel)
            .options(selectinload(ShiftModel.participant))
            .where(
                ShiftModel.participant_id == participant_id,
                ShiftModel.clock_out.is_(None),
            )
            .limit(1)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_entity(model)

    async def list(
        self,
        participant_id: Optional[str] = None,
        active_only: bool = False,
    ) -> List[Shift]:
        stmt = select(ShiftModel).options(selectinload(ShiftModel.participant))
        if participant_id:
            stmt = stmt.where(ShiftModel.participant_id == participant_id)
        if active_only:
            stmt = stmt.where(ShiftModel.clock_out.is_(None))
        stmt = stmt.order_by(ShiftModel.clock_in.desc())

        result = await self._session.execute(stmt)
        models = result.scalars().all()

        return [self._to_entity(model) for model in models]

    async def _get_model(self, shift_id: str) -> Optional[ShiftModel]:
        stmt = (
            select(ShiftModel)
            .options(selectinload(ShiftModel.participant))
            .where(ShiftModel.id == shift_id)
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_entity(self, model: ShiftModel) -> Shift:
        participant = model.participant
        return Shift(
            id=model.id,
            participant_id=model.participant_id,
            clock_in=ensure_utc(model.clock_in),
            clock_out=ensure_utc(model.clock_out),
            bags_collected=model.bags_collected,
            location=model.location,
            notes=model.notes,
            created_by_id=model.created_by_id,
            participant_name=(
                f"{participant.preferred_name or participant.first_name} {participant.last_name}"
                if participant
                else None
            ),
        )
