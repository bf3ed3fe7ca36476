"""Work shift entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4


@dataclass
class Shift:
    """A clock-in/clock-out work session for a participant."""

    participant_id: str
    created_by_id: Optional[str] = None
    location: Optional[str] = None
    notes: Optional[str] = None
    bags_collected: int = 0
    id: str = field(default_factory=lambda: str(uuid4()))
    clock_in: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    clock_out: Optional[datetime] = None
    participant_name: Optional[str] = None

    @property
    def is_active(self) -> bool:
        """A shift is active until the participant clocks out."""
        return self.clock_out is None

    @property
    def duration_minutes(self) -> Optional[int]:
        if self.clock_out is None:
            return None
        return int((self.clock_out - self.clock_in).total_seconds() // 60)

    def close(self, at: Optional[datetime] = None) -> None:
        """Stamp the clock-out time."""
        self.clock_out = at or datetime.now(timezone.utc)
