"""Data transfer objects for destination outcome operations."""

from dataclasses import dataclass, field
from typing import List, Optional

from casework.domain.entities import (
    Benefit,
    DocumentType,
    EmploymentStatus,
    HousingStatus,
)


@dataclass(frozen=True)
class RecordOutcomeRequest:
    """Input data for recording a participant's housing/employment outcome."""
    participant_id: str
    recorded_by_id: str
    housing_status: HousingStatus = HousingStatus.STREET
    employment_status: EmploymentStatus = EmploymentStatus.NONE
    other_housing_details: Optional[str] = None
    benefits: List[Benefit] = field(default_factory=list)
    documents_obtained: List[DocumentType] = field(default_factory=list)
    notes: Optional[str] = None

    def validate(self) -> List[str]:
        errors = []

        if not self.participant_id or not self.participant_id.strip():
            errors.append("Participant ID is required")

        if (
            self.housing_status == HousingStatus.OTHER
            and not (self.other_housing_details or "").strip()
        ):
            errors.append("Please specify details for 'Other' housing status")

        return errors


@dataclass(frozen=True)
class OutcomeResponse:
    """An outcome as returned to API callers."""

    outcome_id: str
    participant_id: str
    participant_name: Optional[str]
    housing_status: str
    other_housing_details: Optional[str]
    employment_status: str
    benefits: List[str]
    documents_obtained: List[str]
    notes: Optional[str]
    recorded_at: str
    recorded_by_name: Optional[str]

    @classmethod
    def from_entity(cls, outcome) -> "OutcomeResponse":
        return cls(
            outcome_id=outcome.id,
            participant_id=outcome.participant_id,
            participant_name=outcome.participant_name,
            housing_status=outcome.housing_status.value,
            other_housing_details=outcome.other_housing_details,
            employment_status=outcome.employment_status.value,
            benefits=[b.value for b in outcome.benefits],
            documents_obtained=[d.value for d in outcome.documents_obtained],
            notes=outcome.notes,
            recorded_at=outcome.recorded_at.isoformat(),
            recorded_by_name=outcome.recorded_by_name,
        )
