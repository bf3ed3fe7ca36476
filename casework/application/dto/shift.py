"""Data transfer objects for shift operations."""

from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional


@dataclass(frozen=True)
class ClockInRequest:
    """Input data for starting a shift."""
    participant_id: str
    created_by_id: str
    location: Optional[str] = None
    notes: Optional[str] = None

    def validate(self) -> List[str]:
        errors = []

        if not self.participant_id or not self.participant_id.strip():
            errors.append("Participant ID is required")

        return errors


@dataclass(frozen=True)
class UpdateShiftRequest:
    """
    Partial update of a shift.

    ``provided`` names the fields the caller actually sent, so an
    explicit null can be told apart from an omitted field.
    """
    bags_collected: Optional[int] = None
    clock_out: bool = False
    notes: Optional[str] = None
    location: Optional[str] = None
    provided: FrozenSet[str] = field(default_factory=frozenset)

    def validate(self) -> List[str]:
        errors = []

        if self.bags_collected is not None and self.bags_collected < 0:
            errors.append("bags_collected cannot be negative")

        return errors


@dataclass(frozen=True)
class ShiftResponse:
    """A shift as returned to API callers."""

    shift_id: str
    participant_id: str
    participant_name: Optional[str]
    clock_in: str
    clock_out: Optional[str]
    is_active: bool
    duration_minutes: Optional[int]
    bags_collected: int
    location: Optional[str]
    notes: Optional[str]

    @classmethod
    def from_entity(cls, shift) -> "ShiftResponse":
        return cls(
            shift_id=shift.id,
            participant_id=shift.participant_id,
            participant_name=shift.participant_name,
            clock_in=shift.clock_in.isoformat(),
            clock_out=shift.clock_out.isoformat() if shift.clock_out else None,
            is_active=shift.is_active,
            duration_minutes=shift.duration_minutes,
            bags_collected=shift.bags_collected,
            location=shift.location,
            notes=shift.notes,
        )
