"""Shift-related Pydantic schemas."""

from typing import Optional

from pydantic import BaseModel, Field


class ClockInRequestSchema(BaseModel):
    """Schema for POST /v1/shifts request body."""

    participant_id: str = Field("", max_length=36)
    location: Optional[str] = Field(None, max_length=255, examples=["Downtown"])
    notes: Optional[str] = None


class UpdateShiftRequestSchema(BaseModel):
    """Schema for PATCH /v1/shifts/{shift_id}; omitted fields are left unchanged."""

    bags_collected: Optional[int] = Field(None, ge=0, examples=[7])
    clock_out: bool = Field(False, description="Stamp the clock-out time now")
    notes: Optional[str] = None
    location: Optional[str] = Field(None, max_length=255)


class ShiftSchema(BaseModel):
    """A work shift."""

    shift_id: str
    participant_id: str
    participant_name: Optional[str] = None
    clock_in: str
    clock_out: Optional[str] = None
    is_active: bool
    duration_minutes: Optional[int] = None
    bags_collected: int
    location: Optional[str] = None
    notes: Optional[str] = None
