"""Data Transfer Objects for application layer."""

from .homework import CreateHomeworkRequest, HomeworkResponse, UpdateHomeworkRequest
from .outcome import OutcomeResponse, RecordOutcomeRequest
from .participant import (
    CreateParticipantRequest,
    ParticipantDetailResponse,
    ParticipantResponse,
)
from .payment import IssuePaymentRequest, IssuePaymentResponse, PaymentResponse
from .shift import ClockInRequest, ShiftResponse, UpdateShiftRequest

__all__ = [
    "CreateHomeworkRequest",
    "HomeworkResponse",
    "UpdateHomeworkRequest",
    "OutcomeResponse",
    "RecordOutcomeRequest",
    "CreateParticipantRequest",
    "ParticipantDetailResponse",
    "ParticipantResponse",
    "IssuePaymentRequest",
    "IssuePaymentResponse",
    "PaymentResponse",
    "ClockInRequest",
    "ShiftResponse",
    "UpdateShiftRequest",
]
