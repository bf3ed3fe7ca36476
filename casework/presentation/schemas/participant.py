"""Participant-related Pydantic schemas."""

from typing import Optional

from pydantic import BaseModel, Field

from .payment import PaymentStatusSchema


class CreateParticipantRequestSchema(BaseModel):
    """Schema for POST /v1/participants request body."""

    first_name: str = Field("", max_length=255, examples=["Maria"])
    last_name: str = Field("", max_length=255, examples=["Santos"])
    preferred_name: Optional[str] = Field(None, max_length=255)
    phone: Optional[str] = Field(None, max_length=50, examples=["(619) 555-0102"])
    email: Optional[str] = Field(None, max_length=255)
    notes: Optional[str] = None


class ParticipantSchema(BaseModel):
    """A participant."""

    participant_id: str
    first_name: str
    last_name: str
    preferred_name: Optional[str] = None
    display_name: str
    phone: Optional[str] = None
    email: Optional[str] = None
    notes: Optional[str] = None
    is_active: bool
    enrollment_date: str
    shift_count: int = Field(0, ge=0)
    payment_count: int = Field(0, ge=0)


class ParticipantDetailSchema(BaseModel):
    """Schema for GET /v1/participants/{participant_id}."""

    participant: ParticipantSchema
    payment_status: PaymentStatusSchema
