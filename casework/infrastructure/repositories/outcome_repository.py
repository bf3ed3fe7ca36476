"""PostgreSQL repository implementation for destination outcomes."""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from casework.domain.entities import (
    Benefit,
    DestinationOutcome,
    DocumentType,
    EmploymentStatus,
    HousingStatus,
)
from casework.domain.interfaces import OutcomeRepository
from casework.infrastructure.database.models import DestinationOutcomeModel, ensure_utc


def _join(values) -> str:
    return ",".join(v.value for v in values)


def _split(raw: str, enum_cls) -> list:
    return [enum_cls(v) for v in raw.split(",") if v]


class PostgresOutcomeRepository(OutcomeRepository):
    """PostgreSQL-backed outcome repository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, outcome: DestinationOutcome) -> DestinationOutcome:
        model = DestinationOutcomeModel(
            id=outcome.id,
            participant_id=outcome.participant_id,
            housing_status=outcome.housing_status.value,
            other_housing_details=outcome.other_housing_details,
            employment_status=outcome.employment_status.value,
            benefits=_join(outcome.benefits),
            documents_obtained=_join(outcome.documents_obtained),
            notes=outcome.notes,
            recorded_at=outcome.recorded_at,
            recorded_by_id=outcome.recorded_by_id,
        )

        self._session.add(model)
        await self._session.flush()

        stmt = (
            select(DestinationOutcomeModel)
            .options(
                selectinload(DestinationOutcomeModel.participant),
                selectinload(DestinationOutcomeModel.recorded_by),
            )
            .where(DestinationOutcomeModel.id == outcome.id)
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)

        return self._to_entity(result.scalar_one())

    async def list(self, participant_id: Optional[str] = None) -> List[DestinationOutcome]:
        stmt = select(DestinationOutcomeModel).options(
            selectinload(DestinationOutcomeModel.participant),
            selectinload(DestinationOutcomeModel.recorded_by),
        )
        if participant_id:
            stmt = stmt.where(DestinationOutcomeModel.participant_id == participant_id)
        stmt = stmt.order_by(DestinationOutcomeModel.recorded_at.desc())

        result = await self._session.execute(stmt)
        models = result.scalars().all()

        return [self._to_entity(model) for model in models]

    def _to_entity(self, model: DestinationOutcomeModel) -> DestinationOutcome:
        participant = model.participant
        return DestinationOutcome(
            id=model.id,
            participant_id=model.participant_id,
            housing_status=HousingStatus(model.housing_status),
            other_housing_details=model.other_housing_details,
            employment_status=EmploymentStatus(model.employment_status),
            benefits=_split(model.benefits, Benefit),
            documents_obtained=_split(model.documents_obtained, DocumentType),
            notes=model.notes,
            recorded_at=ensure_utc(model.recorded_at),
            recorded_by_id=model.recorded_by_id,
            participant_name=(
                f"{participant.first_name} {participant.last_name}" if participant else None
            ),
            recorded_by_name=model.recorded_by.name if model.recorded_by else None,
        )
