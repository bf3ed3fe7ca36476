"""Data transfer objects for participant operations."""

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class CreateParticipantRequest:
    """Input data for enrolling a participant."""
    first_name: str
    last_name: str
    created_by_id: str
    preferred_name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    notes: Optional[str] = None

    def validate(self) -> List[str]:
        errors = []

        if not (self.first_name or "").strip() or not (self.last_name or "").strip():
            errors.append("First name and last name are required")

        return errors


@dataclass(frozen=True)
class ParticipantResponse:
    """A participant as returned to API callers."""

    participant_id: str
    first_name: str
    last_name: str
    preferred_name: Optional[str]
    display_name: str
    phone: Optional[str]
    email: Optional[str]
    notes: Optional[str]
    is_active: bool
    enrollment_date: str
    shift_count: int
    payment_count: int

    @classmethod
    def from_entity(cls, participant) -> "ParticipantResponse":
        return cls(
            participant_id=participant.id,
            first_name=participant.first_name,
            last_name=participant.last_name,
            preferred_name=participant.preferred_name,
            display_name=participant.display_name,
            phone=participant.phone,
            email=participant.email,
            notes=participant.notes,
            is_active=participant.is_active,
            enrollment_date=participant.enrollment_date.isoformat(),
            shift_count=participant.shift_count,
            payment_count=participant.payment_count,
        )


@dataclass(frozen=True)
class ParticipantDetailResponse:
    """A participant together with their payment standing."""

    participant: ParticipantResponse
    payment_status: dict
