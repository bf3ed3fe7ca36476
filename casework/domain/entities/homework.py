"""Homework assignment entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from uuid import uuid4


class HomeworkFilter(str, Enum):
    """Listing filters for homework assignments."""

    OVERDUE = "overdue"
    PENDING = "pending"
    COMPLETED = "completed"


@dataclass
class HomeworkAssignment:
    """A task assigned to a participant by staff (e.g. obtain an ID card)."""

    participant_id: str
    title: str
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    notes: Optional[str] = None
    assigned_by_id: Optional[str] = None
    is_completed: bool = False
    completed_date: Optional[datetime] = None
    id: str = field(default_factory=lambda: str(uuid4()))
    assigned_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    participant_name: Optional[str] = None
    assigned_by_name: Optional[str] = None

    def set_completed(self, completed: bool, at: Optional[datetime] = None) -> None:
        """Toggle completion, stamping or clearing the completion date."""
        self.is_completed = completed
        self.completed_date = (at or datetime.now(timezone.utc)) if completed else None

    def is_overdue(self, now: datetime) -> bool:
        return (
            not self.is_completed
            and self.due_date is not None
            and self.due_date < now
        )
