"""Participant entity representing an enrolled program member."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4


@dataclass
class Participant:
    """
    A person enrolled in the Cash for Trash program.

    Attributes:
        first_name: Legal first name
        last_name: Legal last name
        preferred_name: Name the participant goes by, if different
        enrollment_date: When the participant joined the program
        is_active: Inactive participants are kept for history only
        created_by_id: Staff user who enrolled the participant
        shift_count: Number of shifts worked (populated on listings)
        payment_count: Number of payments received (populated on listings)
    """

    first_name: str
    last_name: str
    preferred_name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    notes: Optional[str] = None
    created_by_id: Optional[str] = None
    is_active: bool = True
    id: str = field(default_factory=lambda: str(uuid4()))
    enrollment_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    shift_count: int = 0
    payment_count: int = 0

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def display_name(self) -> str:
        """Preferred name when set, otherwise the first name, plus last name."""
        return f"{self.preferred_name or self.first_name} {self.last_name}"
