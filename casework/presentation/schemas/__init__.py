"""Pydantic schemas for API request/response validation."""

from .error import (
    DeletedResponseSchema,
    EligibilityDetailSchema,
    ErrorResponseSchema,
    PaymentRejectedSchema,
)
from .homework import (
    CreateHomeworkRequestSchema,
    HomeworkSchema,
    UpdateHomeworkRequestSchema,
)
from .outcome import OutcomeSchema, RecordOutcomeRequestSchema
from .participant import (
    CreateParticipantRequestSchema,
    ParticipantDetailSchema,
    ParticipantSchema,
)
from .payment import (
    IssuePaymentRequestSchema,
    IssuePaymentResponseSchema,
    PaymentSchema,
    PaymentStatusSchema,
)
from .shift import ClockInRequestSchema, ShiftSchema, UpdateShiftRequestSchema

__all__ = [
    "DeletedResponseSchema",
    "EligibilityDetailSchema",
    "ErrorResponseSchema",
    "PaymentRejectedSchema",
    "CreateHomeworkRequestSchema",
    "HomeworkSchema",
    "UpdateHomeworkRequestSchema",
    "OutcomeSchema",
    "RecordOutcomeRequestSchema",
    "CreateParticipantRequestSchema",
    "ParticipantDetailSchema",
    "ParticipantSchema",
    "IssuePaymentRequestSchema",
    "IssuePaymentResponseSchema",
    "PaymentSchema",
    "PaymentStatusSchema",
    "ClockInRequestSchema",
    "ShiftSchema",
    "UpdateShiftRequestSchema",
]
