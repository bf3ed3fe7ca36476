"""Data transfer objects for gift-card payment operations."""

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class IssuePaymentRequest:
    """Input data for issuing a gift-card payment."""
    participant_id: str
    issued_by_id: str
    shift_id: Optional[str] = None
    notes: Optional[str] = None

    def validate(self) -> List[str]:
        errors = []

        if not self.participant_id or not self.participant_id.strip():
            errors.append("Participant ID is required")

        if not self.issued_by_id or not self.issued_by_id.strip():
            errors.append("issued_by_id is required")

        return errors


@dataclass(frozen=True)
class PaymentResponse:
    """A payment as returned to API callers."""

    payment_id: str
    participant_id: str
    participant_name: Optional[str]
    amount: int
    issued_at: str
    issued_by_id: str
    issued_by_name: Optional[str]
    shift_id: Optional[str]
    notes: Optional[str]

    @classmethod
    def from_entity(cls, payment) -> "PaymentResponse":
        return cls(
            payment_id=payment.id,
            participant_id=payment.participant_id,
            participant_name=payment.participant.full_name if payment.participant else None,
            amount=payment.amount,
            issued_at=payment.issued_at.isoformat(),
            issued_by_id=payment.issued_by_id,
            issued_by_name=payment.issued_by.name if payment.issued_by else None,
            shift_id=payment.shift_id,
            notes=payment.notes,
        )


@dataclass(frozen=True)
class IssuePaymentResponse:
    """Result of a successful issuance."""

    payment: PaymentResponse
    message: str
    remaining_payments: int
