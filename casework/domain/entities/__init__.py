"""Domain Entities - Core business objects."""

from .user import StaffUser, UserRole
from .participant import Participant
from .payment import GiftCardPayment, PaymentHistoryEntry
from .shift import Shift
from .homework import HomeworkAssignment, HomeworkFilter
from .outcome import (
    Benefit,
    DestinationOutcome,
    DocumentType,
    EmploymentStatus,
    HousingStatus,
)

__all__ = [
    "StaffUser",
    "UserRole",
    "Participant",
    "GiftCardPayment",
    "PaymentHistoryEntry",
    "Shift",
    "HomeworkAssignment",
    "HomeworkFilter",
    "Benefit",
    "DestinationOutcome",
    "DocumentType",
    "EmploymentStatus",
    "HousingStatus",
]
