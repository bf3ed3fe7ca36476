"""Gift-card payment entities."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from .participant import Participant
from .user import StaffUser


@dataclass(frozen=True)
class PaymentHistoryEntry:
    """The slice of a past payment needed to evaluate eligibility."""

    amount: int
    issued_at: datetime


@dataclass(frozen=True)
class GiftCardPayment:
    """
    A gift-card payment issued to a participant.

    Payments are immutable once created. Corrections are made by
    recording a separate compensating record, never by editing.
    """

    participant_id: str
    amount: int
    issued_by_id: str
    shift_id: Optional[str] = None
    notes: Optional[str] = None
    id: str = field(default_factory=lambda: str(uuid4()))
    issued_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # Materialized for callers; not part of the stored row
    participant: Optional[Participant] = None
    issued_by: Optional[StaffUser] = None
