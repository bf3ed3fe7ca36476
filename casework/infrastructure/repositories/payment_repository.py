"""PostgreSQL implementation of PaymentRepository."""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from casework.domain.entities import GiftCardPayment, PaymentHistoryEntry, StaffUser, UserRole
from casework.domain.interfaces import PaymentRepository
from casework.infrastructure.database.models import GiftCardPaymentModel, UserModel, ensure_utc

from .participant_repository import PostgresParticipantRepository


def to_staff_user(model: UserModel) -> StaffUser:
    """Convert a user row to the domain identity."""
    return StaffUser(
        id=model.id,
        role=UserRole(model.role),
        name=model.name,
        email=model.email,
    )


class PostgresPaymentRepository(PaymentRepository):
    """
    PostgreSQL implementation of the gift-card payment repository.

    Rows are inserted once and never modified.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def find_history(self, participant_id: str) -> List[PaymentHistoryEntry]:
        """Retrieve amount and issue time of every payment for a participant."""
        stmt = select(
            GiftCardPaymentModel.amount,
            GiftCardPaymentModel.issued_at,
        ).where(GiftCardPaymentModel.participant_id == participant_id)
        result = await self._session.execute(stmt)

        return [
            PaymentHistoryEntry(amount=amount, issued_at=ensure_utc(issued_at))
            for amount, issued_at in result.all()
        ]

    async def create(self, payment: GiftCardPayment) -> GiftCardPayment:
        """Insert a payment and return it with participant and issuer loaded."""
        model = GiftCardPaymentModel(
            id=payment.id,
            participant_id=payment.participant_id,
            amount=payment.amount,
            issued_at=payment.issued_at,
            issued_by_id=payment.issued_by_id,
            shift_id=payment.shift_id,
            notes=payment.notes,
        )

        self._session.add(model)
        await self._session.flush()

        stmt = (
            select(GiftCardPaymentModel)
            .options(
                selectinload(GiftCardPaymentModel.participant),
                selectinload(GiftCardPaymentModel.issued_by),
            )
            .where(GiftCardPaymentModel.id == payment.id)
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)

        return self._to_entity(result.scalar_one())

    async def list(self, participant_id: Optional[str] = None) -> List[GiftCardPayment]:
        """Retrieve payments newest first."""
        stmt = select(GiftCardPaymentModel).options(
            selectinload(GiftCardPaymentModel.participant),
            selectinload(GiftCardPaymentModel.issued_by),
        )
        if participant_id:
            stmt = stmt.where(GiftCardPaymentModel.participant_id == participant_id)
        stmt = stmt.order_by(GiftCardPaymentModel.issued_at.desc())

        result = await self._session.execute(stmt)
        models = result.scalars().all()

        return [self._to_entity(model) for model in models]

    @staticmethod
    def _to_entity(model: GiftCardPaymentModel) -> GiftCardPayment:
        """Convert database model to domain entity."""
        return GiftCardPayment(
            id=model.id,
            participant_id=model.participant_id,
            amount=model.amount,
            issued_at=ensure_utc(model.issued_at),
            issued_by_id=model.issued_by_id,
            shift_id=model.shift_id,
            notes=model.notes,
            participant=(
                PostgresParticipantRepository._to_entity(model.participant)
                if model.participant
                else None
            ),
            issued_by=to_staff_user(model.issued_by) if model.issued_by else None,
        )
