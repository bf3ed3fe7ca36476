"""Repository implementations."""

from .homework_repository import PostgresHomeworkRepository
from .outcome_repository import PostgresOutcomeRepository
from .participant_repository import PostgresParticipantRepository
from .payment_repository import PostgresPaymentRepository
from .shift_repository import PostgresShiftRepository

__all__ = [
    "PostgresHomeworkRepository",
    "PostgresOutcomeRepository",
    "PostgresParticipantRepository",
    "PostgresPaymentRepository",
    "PostgresShiftRepository",
]
