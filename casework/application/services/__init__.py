"""Application services (use cases)."""

from .homework_service import HomeworkService
from .outcome_service import OutcomeService
from .participant_service import ParticipantService
from .payment_service import PaymentService
from .shift_service import ShiftService

__all__ = [
    "HomeworkService",
    "OutcomeService",
    "ParticipantService",
    "PaymentService",
    "ShiftService",
]
