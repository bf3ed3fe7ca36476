"""Outcome-related Pydantic schemas."""

from typing import List, Optional

from pydantic import BaseModel, Field

from casework.domain.entities import (
    Benefit,
    DocumentType,
    EmploymentStatus,
    HousingStatus,
)


class RecordOutcomeRequestSchema(BaseModel):
    """Schema for POST /v1/outcomes request body."""

    participant_id: str = Field("", max_length=36)
    housing_status: HousingStatus = HousingStatus.STREET
    other_housing_details: Optional[str] = None
    employment_status: EmploymentStatus = EmploymentStatus.NONE
    benefits: List[Benefit] = Field(default_factory=list)
    documents_obtained: List[DocumentType] = Field(default_factory=list)
    notes: Optional[str] = None


class OutcomeSchema(BaseModel):
    """A recorded destination outcome."""

    outcome_id: str
    participant_id: str
    participant_name: Optional[str] = None
    housing_status: HousingStatus
    other_housing_details: Optional[str] = None
    employment_status: EmploymentStatus
    benefits: List[Benefit]
    documents_obtained: List[DocumentType]
    notes: Optional[str] = None
    recorded_at: str
    recorded_by_name: Optional[str] = None
