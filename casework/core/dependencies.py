"""Dependency injection for FastAPI."""

from functools import lru_cache
from datetime import tzinfo
from typing import Annotated, Optional

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from casework.core.config import settings
from casework.domain.entities import StaffUser, UserRole
from casework.domain.exceptions import UnauthorizedException
from casework.infrastructure.database import get_db_session
from casework.infrastructure.repositories import (
    PostgresHomeworkRepository,
    PostgresOutcomeRepository,
    PostgresParticipantRepository,
    PostgresPaymentRepository,
    PostgresShiftRepository,
)
from casework.application.services import (
    HomeworkService,
    OutcomeService,
    ParticipantService,
    PaymentService,
    ShiftService,
)
from casework.service.eligibility import DEFAULT_POLICY, PaymentPolicy, resolve_timezone


# Repository dependencies
async def get_participant_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> PostgresParticipantRepository:
    """Get a ParticipantRepository instance."""
    return PostgresParticipantRepository(session)


async def get_payment_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> PostgresPaymentRepository:
    """Get a PaymentRepository instance."""
    return PostgresPaymentRepository(session)


async def get_shift_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> PostgresShiftRepository:
    """Get a ShiftRepository instance."""
    return PostgresShiftRepository(session)


async def get_homework_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> PostgresHomeworkRepository:
    """Get a HomeworkRepository instance."""
    return PostgresHomeworkRepository(session)


async def get_outcome_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> PostgresOutcomeRepository:
    """Get an OutcomeRepository instance."""
    return PostgresOutcomeRepository(session)


# Program configuration
def get_payment_policy() -> PaymentPolicy:
    """Get the program's payment policy."""
    return DEFAULT_POLICY


@lru_cache
def get_program_timezone() -> tzinfo:
    """Get the timezone that defines the Sunday-Saturday payment week."""
    return resolve_timezone(settings.program_timezone)


# Caller identity (authenticated upstream)
async def get_current_user(
    x_user_id: Annotated[Optional[str], Header()] = None,
    x_user_role: Annotated[Optional[str], Header()] = None,
    x_user_name: Annotated[Optional[str], Header()] = None,
) -> Optional[StaffUser]:
    """
    Build the caller identity forwarded by the authenticating gateway.

    The identity is trusted as given. Unknown roles fall back to STAFF.
    """
    if not x_user_id or not x_user_id.strip():
        return None

    try:
        role = UserRole((x_user_role or UserRole.STAFF.value).upper())
    except ValueError:
        role = UserRole.STAFF

    return StaffUser(id=x_user_id.strip(), role=role, name=x_user_name)


async def require_current_user(
    user: Annotated[Optional[StaffUser], Depends(get_current_user)],
) -> StaffUser:
    """Like get_current_user, but rejects anonymous callers."""
    if user is None:
        raise UnauthorizedException()
    return user


# Service dependencies
async def get_payment_service(
    payment_repo: Annotated[PostgresPaymentRepository, Depends(get_payment_repository)],
    participant_repo: Annotated[
        PostgresParticipantRepository, Depends(get_participant_repository)
    ],
    shift_repo: Annotated[PostgresShiftRepository, Depends(get_shift_repository)],
    policy: Annotated[PaymentPolicy, Depends(get_payment_policy)],
    program_timezone: Annotated[tzinfo, Depends(get_program_timezone)],
) -> PaymentService:
    """Get a PaymentService instance with all dependencies."""
    return PaymentService(
        payment_repository=payment_repo,
        participant_repository=participant_repo,
        shift_repository=shift_repo,
        policy=policy,
        program_timezone=program_timezone,
    )


async def get_participant_service(
    participant_repo: Annotated[
        PostgresParticipantRepository, Depends(get_participant_repository)
    ],
    payment_service: Annotated[PaymentService, Depends(get_payment_service)],
) -> ParticipantService:
    """Get a ParticipantService instance."""
    return ParticipantService(
        participant_repository=participant_repo,
        payment_service=payment_service,
    )


async def get_shift_service(
    shift_repo: Annotated[PostgresShiftRepository, Depends(get_shift_repository)],
    participant_repo: Annotated[
        PostgresParticipantRepository, Depends(get_participant_repository)
    ],
) -> ShiftService:
    """Get a ShiftService instance."""
    return ShiftService(shift_repository=shift_repo, participant_repository=participant_repo)


async def get_homework_service(
    homework_repo: Annotated[PostgresHomeworkRepository, Depends(get_homework_repository)],
    participant_repo: Annotated[
        PostgresParticipantRepository, Depends(get_participant_repository)
    ],
) -> HomeworkService:
    """Get a HomeworkService instance."""
    return HomeworkService(
        homework_repository=homework_repo,
        participant_repository=participant_repo,
    )


async def get_outcome_service(
    outcome_repo: Annotated[PostgresOutcomeRepository, Depends(get_outcome_repository)],
    participant_repo: Annotated[
        PostgresParticipantRepository, Depends(get_participant_repository)
    ],
) -> OutcomeService:
    """Get an OutcomeService instance."""
    return OutcomeService(
        outcome_repository=outcome_repo,
        participant_repository=participant_repo,
    )
