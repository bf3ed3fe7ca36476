"""Data transfer objects for homework operations."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import FrozenSet, List, Optional


@dataclass(frozen=True)
class CreateHomeworkRequest:
    """Input data for assigning homework."""
    participant_id: str
    title: str
    assigned_by_id: str
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    notes: Optional[str] = None

    def validate(self) -> List[str]:
        errors = []

        if not (self.participant_id or "").strip() or not (self.title or "").strip():
            errors.append("Participant and title are required")

        return errors


@dataclass(frozen=True)
class UpdateHomeworkRequest:
    """Partial update of a homework assignment; see ``provided``."""
    is_completed: Optional[bool] = None
    title: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    notes: Optional[str] = None
    provided: FrozenSet[str] = field(default_factory=frozenset)

    def validate(self) -> List[str]:
        errors = []

        if "title" in self.provided and not (self.title or "").strip():
            errors.append("title cannot be empty")

        return errors


@dataclass(frozen=True)
class HomeworkResponse:
    """A homework assignment as returned to API callers."""

    homework_id: str
    participant_id: str
    participant_name: Optional[str]
    title: str
    description: Optional[str]
    assigned_date: str
    due_date: Optional[str]
    is_completed: bool
    completed_date: Optional[str]
    is_overdue: bool
    notes: Optional[str]
    assigned_by_name: Optional[str]

    @classmethod
    def from_entity(cls, homework, now: datetime) -> "HomeworkResponse":
        return cls(
            homework_id=homework.id,
            participant_id=homework.participant_id,
            participant_name=homework.participant_name,
            title=homework.title,
            description=homework.description,
            assigned_date=homework.assigned_date.isoformat(),
            due_date=homework.due_date.isoformat() if homework.due_date else None,
            is_completed=homework.is_completed,
            completed_date=(
                homework.completed_date.isoformat() if homework.completed_date else None
            ),
            is_overdue=homework.is_overdue(now),
            notes=homework.notes,
            assigned_by_name=homework.assigned_by_name,
        )
