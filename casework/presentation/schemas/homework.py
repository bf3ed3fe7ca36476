"""Homework-related Pydantic schemas."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class CreateHomeworkRequestSchema(BaseModel):
    """Schema for POST /v1/homework request body."""

    participant_id: str = Field("", max_length=36)
    title: str = Field("", max_length=255, examples=["Get a state ID"])
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    notes: Optional[str] = None


class UpdateHomeworkRequestSchema(BaseModel):
    """Schema for PATCH /v1/homework/{homework_id}; omitted fields are left unchanged."""

    is_completed: Optional[bool] = None
    title: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    notes: Optional[str] = None


class HomeworkSchema(BaseModel):
    """A homework assignment."""

    homework_id: str
    participant_id: str
    participant_name: Optional[str] = None
    title: str
    description: Optional[str] = None
    assigned_date: str
    due_date: Optional[str] = None
    is_completed: bool
    completed_date: Optional[str] = None
    is_overdue: bool
    notes: Optional[str] = None
    assigned_by_name: Optional[str] = None
