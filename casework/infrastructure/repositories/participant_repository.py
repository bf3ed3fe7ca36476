"""PostgreSQL implementation of ParticipantRepository."""

from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from casework.domain.entities import Participant
from casework.domain.interfaces import ParticipantRepository
from casework.infrastructure.database.models import (
    GiftCardPaymentModel,
    ParticipantModel,
    ShiftModel,
    ensure_utc,
)


class PostgresParticipantRepository(ParticipantRepository):
    """
    PostgreSQL implementation of the Participant repository.

    Uses SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, participant: Participant) -> Participant:
        """Persist a participant to the database."""
        model = ParticipantModel(
            id=participant.id,
            first_name=participant.first_name,
            last_name=participant.last_name,
            preferred_name=participant.preferred_name,
            phone=participant.phone,
            email=participant.email,
            notes=participant.notes,
            is_active=participant.is_active,
            enrollment_date=participant.enrollment_date,
            created_by_id=participant.created_by_id,
            created_at=participant.created_at,
        )

        self._session.add(model)
        await self._session.flush()

        return participant

    async def get_by_id(self, participant_id: str) -> Optional[Participant]:
        """Retrieve a participant by ID."""
        stmt = select(ParticipantModel).where(ParticipantModel.id == participant_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_entity(model)

    async def lock_for_update(self, participant_id: str) -> Optional[Participant]:
        """
        Retrieve a participant with SELECT ... FOR UPDATE.

        The lock is released when the request transaction commits or
        rolls back. Backends without row locks (SQLite) ignore the clause.
        """
        stmt = (
            select(ParticipantModel)
            .where(ParticipantModel.id == participant_id)
            .with_for_update()
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_entity(model)

    async def list_all(self) -> List[Participant]:
        """Retrieve all participants with shift and payment counts."""
        shift_count = (
            select(func.count(ShiftModel.id))
            .where(ShiftModel.participant_id == ParticipantModel.id)
            .correlate(ParticipantModel)
            .scalar_subquery()
        )
        payment_count = (
            select(func.count(GiftCardPaymentModel.id))
            .where(GiftCardPaymentModel.participant_id == ParticipantModel.id)
            .correlate(ParticipantModel)
            .scalar_subquery()
        )
        stmt = (
            select(
                ParticipantModel,
                shift_count.label("shift_count"),
                payment_count.label("payment_count"),
            )
            .order_by(ParticipantModel.last_name.asc(), ParticipantModel.first_name.asc())
        )
        result = await self._session.execute(stmt)

        participants = []
        for model, shifts, payments in result.all():
            participant = self._to_entity(model)
            participant.shift_count = shifts or 0
            participant.payment_count = payments or 0
            participants.append(participant)

        return participants

    @staticmethod
    def _to_entity(model: ParticipantModel) -> Participant:
        """Convert database model to domain entity."""
        return Participant(
            id=model.id,
            first_name=model.first_name,
            last_name=model.last_name,
            preferred_name=model.preferred_name,
            phone=model.phone,
            email=model.email,
            notes=model.notes,
            is_active=model.is_active,
            enrollment_date=ensure_utc(model.enrollment_date),
            created_by_id=model.created_by_id,
            created_at=ensure_utc(model.created_at),
        )
